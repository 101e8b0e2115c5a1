"""LCOV parsing core: tokenizer, payload validators and the aggregator."""

from __future__ import annotations

from lcovsum.core.aggregate import Aggregator, FileBlock, Idle, InFile
from lcovsum.core.model import (
    BranchData,
    FileRecord,
    FunctionData,
    LineData,
    Summary,
    coverage_rate,
)
from lcovsum.core.records import Record, RecordKind, tokenize

__all__ = [
    "Aggregator",
    "BranchData",
    "FileBlock",
    "FileRecord",
    "FunctionData",
    "Idle",
    "InFile",
    "LineData",
    "Record",
    "RecordKind",
    "Summary",
    "coverage_rate",
    "tokenize",
]
