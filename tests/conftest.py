from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

DATA_DIR = Path(__file__).parent / "data"

# two closed file blocks, 3 lines found, 2 hit
TWO_FILE_REPORT = """\
SF:/a.go
DA:1,1
DA:2,0
LF:2
LH:1
end_of_record
SF:/b.go
DA:1,1
LF:1
LH:1
end_of_record
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def data_file() -> Callable[[str], Path]:
    def get(name: str) -> Path:
        return DATA_DIR / name

    return get


@pytest.fixture
def lcov_file(tmp_path: Path) -> Callable[..., Path]:
    def write(content: str, filename: str = "coverage.info") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return write
