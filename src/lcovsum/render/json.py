from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lcovsum.core.model import Summary


def summary_to_dict(summary: Summary) -> dict[str, object]:
    """Convert *summary* to plain containers, adding ``functions_found`` per file."""
    data = asdict(summary)
    for record, file_data in zip(summary.files, data["files"], strict=True):
        file_data["functions_found"] = record.functions_found
    return data


def render_json(summary: Summary) -> str:
    return json.dumps(summary_to_dict(summary), indent=2, sort_keys=True)


__all__ = ["render_json", "summary_to_dict"]
