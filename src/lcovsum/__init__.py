from lcovsum._meta import __version__, logger
from lcovsum.api import summarize, summarize_path, summarize_text
from lcovsum.core.model import BranchData, FileRecord, FunctionData, LineData, Summary
from lcovsum.errors import (
    LcovError,
    LcovsumError,
    RecordFormatError,
    RecordSequenceError,
    RecordValueError,
    UnterminatedRecordError,
)

__all__ = [
    "BranchData",
    "FileRecord",
    "FunctionData",
    "LcovError",
    "LcovsumError",
    "LineData",
    "RecordFormatError",
    "RecordSequenceError",
    "RecordValueError",
    "Summary",
    "UnterminatedRecordError",
    "__version__",
    "logger",
    "summarize",
    "summarize_path",
    "summarize_text",
]
