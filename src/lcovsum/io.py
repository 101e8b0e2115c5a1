from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import BinaryIO

STDIN = "-"


@contextmanager
def open_input(source: str) -> Iterator[BinaryIO]:
    """Yield a binary stream for *source*, a path or ``-`` for stdin.

    Decoding is left to :func:`lcovsum.api.summarize`. Standard input is left
    open on exit.
    """
    if source == STDIN:
        yield sys.stdin.buffer
        return
    with Path(source).open("rb") as f:
        yield f


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path(STDIN):
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")


__all__ = ["STDIN", "open_input", "write_output"]
