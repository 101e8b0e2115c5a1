"""The ``lcov --summary`` style report."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lcovsum.core.model import Summary

NO_DATA = "no data found"


def _metric(label: str, rate: float, covered: int, total: int, unit: str) -> str:
    return f"  {label}: {rate:.1f}% ({covered} of {total} {unit})"


def render_text(summary: Summary) -> str:
    """Render the fixed four-metric summary block (no trailing newline)."""
    out = [
        "Summary coverage rate:",
        f"  source files: {summary.total_files}",
        _metric("lines.......", summary.line_coverage_rate, summary.covered_lines, summary.total_lines, "lines"),
    ]
    if summary.total_functions > 0:
        out.append(
            _metric(
                "functions...",
                summary.function_coverage_rate,
                summary.covered_functions,
                summary.total_functions,
                "functions",
            )
        )
    else:
        out.append(f"  functions...: {NO_DATA}")
    if summary.total_branches > 0:
        out.append(
            _metric(
                "branches....",
                summary.branch_coverage_rate,
                summary.covered_branches,
                summary.total_branches,
                "branches",
            )
        )
    else:
        out.append(f"  branches....: {NO_DATA}")
    return "\n".join(out)


__all__ = ["NO_DATA", "render_text"]
