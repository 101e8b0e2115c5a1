"""Streaming LCOV aggregator.

The aggregator is a two-state machine. It starts :class:`Idle`; a ``TN`` or
``SF`` record opens a :class:`FileBlock` and moves it to :class:`InFile`,
and ``end_of_record`` folds the block into the running totals and returns
it to :class:`Idle`. File-scoped records seen while idle abort the parse.

One :class:`Aggregator` serves exactly one parse; it holds no shared state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lcovsum._meta import logger
from lcovsum.core.model import (
    BranchData,
    FileRecord,
    FunctionData,
    LineData,
    Summary,
    coverage_rate,
)
from lcovsum.core.payloads import (
    parse_branch_data,
    parse_count,
    parse_function_hits,
    parse_function_name,
    parse_line_data,
)
from lcovsum.core.records import FILE_SCOPED, RecordKind, tokenize
from lcovsum.errors import LcovError, RecordSequenceError, UnterminatedRecordError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lcovsum.core.records import Record

# wording used in "<what> without source file"
_SCOPE_NAMES: dict[str, str] = {
    RecordKind.LINE_DATA: "line data",
    RecordKind.LINES_FOUND: "lines found",
    RecordKind.LINES_HIT: "lines hit",
    RecordKind.FUNCTION_NAME: "function name",
    RecordKind.FUNCTION_DATA: "function data",
    RecordKind.BRANCH_DATA: "branch data",
    RecordKind.BRANCH_FOUND: "branch found",
    RecordKind.BRANCH_HIT: "branch hit",
}


@dataclass(slots=True)
class FileBlock:
    """Mutable accumulator for the file block currently being read."""

    test_name: str = ""
    source_file: str = ""
    lines: list[LineData] = field(default_factory=list)
    lines_found: int = 0
    lines_hit: int = 0
    functions: list[FunctionData] = field(default_factory=list)
    functions_hit: int = 0
    branches: list[BranchData] = field(default_factory=list)
    branches_found: int = 0
    branches_hit: int = 0

    def freeze(self) -> FileRecord:
        return FileRecord(
            source_file=self.source_file,
            test_name=self.test_name,
            lines=tuple(self.lines),
            lines_found=self.lines_found,
            lines_hit=self.lines_hit,
            functions=tuple(self.functions),
            functions_hit=self.functions_hit,
            branches=tuple(self.branches),
            branches_found=self.branches_found,
            branches_hit=self.branches_hit,
        )


@dataclass(frozen=True, slots=True)
class Idle:
    """No file block is open."""


@dataclass(frozen=True, slots=True)
class InFile:
    """A file block is open and owned by the aggregator."""

    block: FileBlock


State = Idle | InFile


@dataclass(slots=True)
class _Totals:
    files: int = 0
    lines: int = 0
    covered_lines: int = 0
    functions: int = 0
    covered_functions: int = 0
    branches: int = 0
    covered_branches: int = 0

    def add(self, block: FileBlock) -> None:
        self.files += 1
        self.lines += block.lines_found
        self.covered_lines += block.lines_hit
        self.functions += len(block.functions)
        self.covered_functions += block.functions_hit
        self.branches += block.branches_found
        self.covered_branches += block.branches_hit


class Aggregator:
    """Fold a stream of LCOV lines into a :class:`Summary`.

    Parameters
    ----------
    strict:
        Raise :class:`UnterminatedRecordError` when input ends inside a file
        block. By default such a trailing block is dropped without counting.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self.state: State = Idle()
        self._totals = _Totals()
        self._files: list[FileRecord] = []

    # ------------------------------------------------------------------ feed
    def feed(self, line: str, line_no: int | None = None) -> None:
        """Consume one raw input line (surrounding whitespace is ignored)."""
        text = line.strip()
        if not text:
            return
        try:
            self.apply(tokenize(text))
        except LcovError as exc:
            exc.locate(line_no=line_no, line=text)
            raise

    def apply(self, record: Record) -> None:
        """Apply one tokenized record to the current state."""
        kind = record.kind
        if kind == RecordKind.TEST_NAME:
            self._open().test_name = record.value
        elif kind == RecordKind.SOURCE_FILE:
            self._open().source_file = record.value
        elif kind == RecordKind.END_OF_RECORD:
            self._close()
        elif kind in FILE_SCOPED:
            self._apply_scoped(self._require_block(kind), record)
        else:
            logger.debug("ignoring unrecognized record kind %r", kind)

    def _apply_scoped(self, block: FileBlock, record: Record) -> None:
        kind, value = record.kind, record.value
        if kind == RecordKind.LINE_DATA:
            block.lines.append(parse_line_data(value))
        elif kind == RecordKind.LINES_FOUND:
            block.lines_found = parse_count(value, what="lines found")
        elif kind == RecordKind.LINES_HIT:
            block.lines_hit = parse_count(value, what="lines hit")
        elif kind == RecordKind.FUNCTION_NAME:
            block.functions.append(parse_function_name(value))
        elif kind == RecordKind.FUNCTION_DATA:
            hits = parse_function_hits(value)
            if hits is not None and hits > 0:
                block.functions_hit += 1
        elif kind == RecordKind.BRANCH_DATA:
            block.branches.append(parse_branch_data(value))
        elif kind == RecordKind.BRANCH_FOUND:
            block.branches_found = parse_count(value, what="branches found")
        elif kind == RecordKind.BRANCH_HIT:
            block.branches_hit = parse_count(value, what="branches hit")

    # ---------------------------------------------------------- transitions
    def _open(self) -> FileBlock:
        """Return the open block, opening a fresh one when idle."""
        if isinstance(self.state, InFile):
            return self.state.block
        block = FileBlock()
        self.state = InFile(block)
        return block

    def _require_block(self, kind: str) -> FileBlock:
        if isinstance(self.state, InFile):
            return self.state.block
        msg = f"{_SCOPE_NAMES[kind]} without source file"
        raise RecordSequenceError(msg)

    def _close(self) -> None:
        if not isinstance(self.state, InFile):
            return
        block = self.state.block
        self._totals.add(block)
        self._files.append(block.freeze())
        logger.debug(
            "closed file block %s (LF=%d LH=%d FN=%d FNH=%d BRF=%d BRH=%d)",
            block.source_file or "<unnamed>",
            block.lines_found,
            block.lines_hit,
            len(block.functions),
            block.functions_hit,
            block.branches_found,
            block.branches_hit,
        )
        self.state = Idle()

    # --------------------------------------------------------------- finish
    def finish(self) -> Summary:
        """Finalize the parse and compute the three coverage rates."""
        if isinstance(self.state, InFile):
            source = self.state.block.source_file or "<unnamed>"
            if self.strict:
                msg = f"unexpected end of input while inside file block for {source}"
                raise UnterminatedRecordError(msg)
            logger.debug("dropping unterminated file block for %s", source)
            self.state = Idle()

        t = self._totals
        return Summary(
            total_files=t.files,
            total_lines=t.lines,
            covered_lines=t.covered_lines,
            line_coverage_rate=coverage_rate(t.covered_lines, t.lines),
            total_functions=t.functions,
            covered_functions=t.covered_functions,
            function_coverage_rate=coverage_rate(t.covered_functions, t.functions),
            total_branches=t.branches,
            covered_branches=t.covered_branches,
            branch_coverage_rate=coverage_rate(t.covered_branches, t.branches),
            files=tuple(self._files),
        )

    def run(self, lines: Iterable[str]) -> Summary:
        """Feed every line of *lines* in order, then :meth:`finish`."""
        for line_no, line in enumerate(lines, start=1):
            self.feed(line, line_no)
        return self.finish()


__all__ = ["Aggregator", "FileBlock", "Idle", "InFile", "State"]
