from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

import lcovsum
from lcovsum import summarize, summarize_path, summarize_text
from lcovsum.errors import LcovError, RecordSequenceError
from tests.conftest import TWO_FILE_REPORT

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


def test_summarize_sample(data_file: Callable[[str], Path]) -> None:
    with data_file("sample.lcov").open(encoding="utf-8") as f:
        summary = summarize(f)

    assert summary.total_files == 2
    assert summary.total_lines == 9  # 5 + 4
    assert summary.covered_lines == 6  # 3 + 3
    assert summary.line_coverage_rate == pytest.approx(66.67, abs=0.01)
    assert summary.total_functions == 0
    assert summary.total_branches == 0


def test_summarize_complex(data_file: Callable[[str], Path]) -> None:
    summary = summarize_path(data_file("complex.lcov"))

    assert summary.total_files == 3
    assert summary.total_lines == 15  # 7 + 5 + 3
    assert summary.covered_lines == 11  # 5 + 3 + 3
    assert summary.line_coverage_rate == pytest.approx(73.33, abs=0.01)
    assert {f.test_name for f in summary.files} == {"unit"}


def test_summarize_with_functions_and_branches(data_file: Callable[[str], Path]) -> None:
    summary = summarize_path(str(data_file("with_functions_and_branches.lcov")))

    assert summary.total_files == 2
    assert summary.total_lines == 10
    assert summary.covered_lines == 7
    assert summary.line_coverage_rate == pytest.approx(70.0)
    assert summary.total_functions == 4
    assert summary.covered_functions == 3
    assert summary.function_coverage_rate == pytest.approx(75.0)
    assert summary.total_branches == 2
    assert summary.covered_branches == 2
    assert summary.branch_coverage_rate == pytest.approx(100.0)
    assert summary.files[1].branches[1].execution_count == 0


def test_summarize_invalid_file(data_file: Callable[[str], Path]) -> None:
    with pytest.raises(LcovError, match="invalid branch data format: 1,0,0"):
        summarize_path(data_file("invalid.lcov"))


def test_summarize_accepts_binary_streams() -> None:
    summary = summarize(io.BytesIO(TWO_FILE_REPORT.encode("utf-8")))
    assert summary.total_files == 2
    assert summary.covered_lines == 2


def test_summarize_accepts_plain_iterables() -> None:
    summary = summarize(["SF:/a.c", "LF:4", "LH:1", "end_of_record"])
    assert summary.line_coverage_rate == pytest.approx(25.0)


def test_summarize_text_line_data_without_source_file() -> None:
    with pytest.raises(RecordSequenceError, match="line data without source file"):
        summarize_text("DA:1,5\nend_of_record")


def test_summarize_strict_flag() -> None:
    assert summarize_text("SF:/a.c\nLF:1\n").total_files == 0
    with pytest.raises(RecordSequenceError):
        summarize_text("SF:/a.c\nLF:1\n", strict=True)


def test_read_errors_propagate_unwrapped() -> None:
    def failing() -> Iterator[str]:
        yield "SF:/a.c\n"
        yield "LF:1\n"
        msg = "simulated read error"
        raise OSError(msg)

    with pytest.raises(OSError, match="simulated read error"):
        summarize(failing())


LATIN1_REPORT = b"SF:/src/caf\xe9.c\nDA:1,1\nLF:1\nLH:1\nend_of_record\n"


def test_non_utf8_source_path_is_counted(tmp_path: Path) -> None:
    path = tmp_path / "latin1.info"
    path.write_bytes(LATIN1_REPORT)

    for summary in (summarize_path(path), summarize(io.BytesIO(LATIN1_REPORT))):
        assert summary.total_files == 1
        assert summary.covered_lines == 1
        assert summary.line_coverage_rate == pytest.approx(100.0)
        assert summary.files[0].source_file == "/src/caf\ufffd.c"


def test_summarize_path_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        summarize_path(tmp_path / "missing.info")


def test_package_exports() -> None:
    assert lcovsum.summarize is summarize
    assert isinstance(lcovsum.__version__, str)
    assert issubclass(lcovsum.RecordValueError, lcovsum.LcovsumError)
