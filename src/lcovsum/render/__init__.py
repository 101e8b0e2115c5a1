"""Renderers turning a :class:`~lcovsum.core.model.Summary` into text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lcovsum.core.config import Format
from lcovsum.render.json import render_json
from lcovsum.render.table import render_table
from lcovsum.render.text import render_text

if TYPE_CHECKING:
    from lcovsum.core.model import Summary


def render(summary: Summary, fmt: Format, *, color: bool = False) -> str:
    """Render *summary* in the requested output format."""
    if fmt is Format.JSON:
        return render_json(summary)
    if fmt is Format.TABLE:
        return render_table(summary, color=color)
    return render_text(summary)


__all__ = ["render", "render_json", "render_table", "render_text"]
