"""Stable programmatic entry points for summarizing LCOV data.

>>> from lcovsum.api import summarize_text
>>> summarize_text("SF:a.c\\nLF:2\\nLH:1\\nend_of_record\\n").line_coverage_rate
50.0
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from lcovsum._meta import logger
from lcovsum.core.aggregate import Aggregator

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from lcovsum.core.model import Summary


# undecodable bytes (e.g. Latin-1 paths) decode to U+FFFD
def _iter_text(stream: Iterable[str | bytes]) -> Iterator[str]:
    for line in stream:
        yield line.decode("utf-8", errors="replace") if isinstance(line, bytes) else line


def summarize(stream: Iterable[str | bytes], *, strict: bool = False) -> Summary:
    """Parse an LCOV stream and return its :class:`Summary`.

    *stream* is anything yielding lines: a text or binary file object, or a
    plain list of strings. The first malformed record raises a
    :class:`~lcovsum.errors.LcovError`; read errors from the stream itself
    propagate unchanged.
    """
    summary = Aggregator(strict=strict).run(_iter_text(stream))
    logger.debug(
        "summarized %d file(s): %d/%d lines, %d/%d functions, %d/%d branches",
        summary.total_files,
        summary.covered_lines,
        summary.total_lines,
        summary.covered_functions,
        summary.total_functions,
        summary.covered_branches,
        summary.total_branches,
    )
    return summary


def summarize_text(text: str, *, strict: bool = False) -> Summary:
    """Summarize LCOV data held in a string."""
    return summarize(io.StringIO(text), strict=strict)


def summarize_path(path: str | Path, *, strict: bool = False) -> Summary:
    """Summarize the LCOV file at *path*."""
    with Path(path).open("rb") as f:
        return summarize(f, strict=strict)


__all__ = ["summarize", "summarize_path", "summarize_text"]
