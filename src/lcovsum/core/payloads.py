"""Validators for the payload of each LCOV record kind.

Each parser receives the raw record value (everything after the first
colon) and either returns typed data or raises :class:`RecordValueError`
with a message naming the offending value.
"""

from __future__ import annotations

import re

from lcovsum.core.model import BranchData, FunctionData, LineData
from lcovsum.errors import RecordValueError

_INT_RE = re.compile(r"[+-]?[0-9]+")

# wire value for a branch whose block was never executed
NOT_EXECUTED = "-"

_LINE_DATA_FIELDS = 2
_BRANCH_DATA_FIELDS = 4
_FUNCTION_DATA_FIELDS = 2


def parse_int(text: str) -> int:
    """Parse a plain decimal integer with an optional sign.

    Stricter than :func:`int`: surrounding whitespace, ``_`` separators and
    non-ASCII digits are rejected.
    """
    if not _INT_RE.fullmatch(text):
        msg = f"invalid literal for integer: {text!r}"
        raise ValueError(msg)
    return int(text)


def parse_count(value: str, *, what: str) -> int:
    """Parse an ``LF``/``LH``/``BRF``/``BRH`` counter."""
    try:
        return parse_int(value)
    except ValueError:
        msg = f"invalid {what} value: {value}"
        raise RecordValueError(msg) from None


def parse_line_data(value: str) -> LineData:
    """``DA:<line>,<count>``"""
    parts = value.split(",")
    try:
        if len(parts) != _LINE_DATA_FIELDS:
            raise ValueError(value)
        return LineData(line_number=parse_int(parts[0]), execution_count=parse_int(parts[1]))
    except ValueError:
        msg = f"invalid line data format: {value}"
        raise RecordValueError(msg) from None


def parse_function_name(value: str) -> FunctionData:
    """``FN:<line>,<name>``; the name may itself contain commas."""
    line, sep, name = value.partition(",")
    try:
        if not sep:
            raise ValueError(value)
        return FunctionData(line_number=parse_int(line), name=name)
    except ValueError:
        msg = f"invalid function name format: {value}"
        raise RecordValueError(msg) from None


def parse_function_hits(value: str) -> int | None:
    """``FNDA:<count>,<name>``; returns ``None`` for a malformed payload.

    Unlike the other record kinds a bad ``FNDA`` never aborts the parse.
    A name containing a comma counts as malformed.
    """
    parts = value.split(",")
    if len(parts) != _FUNCTION_DATA_FIELDS:
        return None
    try:
        return parse_int(parts[0])
    except ValueError:
        return None


def parse_branch_data(value: str) -> BranchData:
    """``BRDA:<line>,<block>,<branch>,<count|->``"""
    parts = value.split(",")
    try:
        if len(parts) != _BRANCH_DATA_FIELDS:
            raise ValueError(value)
        line, block, branch, taken = parts
        return BranchData(
            line_number=parse_int(line),
            block_number=parse_int(block),
            branch_number=parse_int(branch),
            execution_count=0 if taken == NOT_EXECUTED else parse_int(taken),
        )
    except ValueError:
        msg = f"invalid branch data format: {value}"
        raise RecordValueError(msg) from None


__all__ = [
    "NOT_EXECUTED",
    "parse_branch_data",
    "parse_count",
    "parse_function_hits",
    "parse_function_name",
    "parse_int",
    "parse_line_data",
]
