from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from lcovsum.core.model import coverage_rate

if TYPE_CHECKING:
    from lcovsum.core.model import Summary


def _style_percent(covered: int, total: int, green: float, yellow: float) -> str:
    if total == 0:
        return "n/a"
    pct = coverage_rate(covered, total)
    text = f"{pct:.1f}%"
    if pct >= green:
        return f"[green]{text}[/green]"
    if pct >= yellow:
        return f"[yellow]{text}[/yellow]"
    return f"[red]{text}[/red]"


def render_table(
    summary: Summary,
    *,
    color: bool = True,
    green: float = 90.0,
    yellow: float = 75.0,
) -> str:
    """Render a Rich table with one row per source file plus an overall row."""
    table = Table(title="LCOV Coverage Summary", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("File", overflow="fold")
    table.add_column("Lines\nHit/Tot.", justify="right")
    table.add_column("Lines\nCov.", justify="right")
    table.add_column("Funcs\nHit/Tot.", justify="right")
    table.add_column("Funcs\nCov.", justify="right")
    table.add_column("Branch\nHit/Tot.", justify="right")
    table.add_column("Branch\nCov.", justify="right")

    for r in summary.files:
        table.add_row(
            r.source_file or "<unnamed>",
            f"{r.lines_hit}/{r.lines_found}",
            _style_percent(r.lines_hit, r.lines_found, green, yellow),
            f"{r.functions_hit}/{r.functions_found}",
            _style_percent(r.functions_hit, r.functions_found, green, yellow),
            f"{r.branches_hit}/{r.branches_found}",
            _style_percent(r.branches_hit, r.branches_found, green, yellow),
        )

    table.add_section()
    table.add_row(
        f"[bold]Overall ({summary.total_files} files)[/bold]",
        f"[bold]{summary.covered_lines}/{summary.total_lines}[/bold]",
        _style_percent(summary.covered_lines, summary.total_lines, green, yellow),
        f"[bold]{summary.covered_functions}/{summary.total_functions}[/bold]",
        _style_percent(summary.covered_functions, summary.total_functions, green, yellow),
        f"[bold]{summary.covered_branches}/{summary.total_branches}[/bold]",
        _style_percent(summary.covered_branches, summary.total_branches, green, yellow),
    )

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=120)
    console.print(table)
    return buf.getvalue().rstrip()


__all__ = ["render_table"]
