"""Typed coverage model produced by the LCOV aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LineData:
    """A ``DA`` entry."""

    line_number: int
    execution_count: int


@dataclass(frozen=True, slots=True)
class FunctionData:
    """An ``FN`` entry (function definition)."""

    line_number: int
    name: str


@dataclass(frozen=True, slots=True)
class BranchData:
    """A ``BRDA`` entry; a ``-`` count on the wire is stored as ``0``."""

    line_number: int
    block_number: int
    branch_number: int
    execution_count: int


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Coverage for one closed ``SF`` ... ``end_of_record`` block."""

    source_file: str = ""
    test_name: str = ""
    lines: tuple[LineData, ...] = ()
    lines_found: int = 0
    lines_hit: int = 0
    functions: tuple[FunctionData, ...] = ()
    functions_hit: int = 0
    branches: tuple[BranchData, ...] = ()
    branches_found: int = 0
    branches_hit: int = 0

    @property
    def functions_found(self) -> int:
        return len(self.functions)


def coverage_rate(covered: int, total: int) -> float:
    """Return ``covered`` as a percentage of ``total`` (``0.0`` when empty)."""
    if total > 0:
        return 100.0 * covered / total
    return 0.0


@dataclass(frozen=True, slots=True)
class Summary:
    """Whole-report totals and the derived coverage rates.

    Totals are sums over closed file blocks. Lines and branches come from
    the explicit ``LF``/``LH``/``BRF``/``BRH`` counters, never from the raw
    entry lists.
    """

    total_files: int = 0
    total_lines: int = 0
    covered_lines: int = 0
    line_coverage_rate: float = 0.0
    total_functions: int = 0
    covered_functions: int = 0
    function_coverage_rate: float = 0.0
    total_branches: int = 0
    covered_branches: int = 0
    branch_coverage_rate: float = 0.0
    files: tuple[FileRecord, ...] = field(default=())


__all__ = [
    "BranchData",
    "FileRecord",
    "FunctionData",
    "LineData",
    "Summary",
    "coverage_rate",
]
