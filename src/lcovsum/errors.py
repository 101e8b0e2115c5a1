"""Centralised exception hierarchy for lcovsum."""

from __future__ import annotations


class LcovsumError(Exception):
    """Base class for all custom lcovsum exceptions."""


class ConfigError(LcovsumError):
    """The ``[tool.lcovsum]`` configuration table is invalid."""


class LcovError(LcovsumError):
    """An LCOV record could not be parsed.

    ``detail`` is the bare reason (e.g. ``"invalid lines hit value: x"``).
    Once the aggregator knows where the failure happened it calls
    :meth:`locate`, after which ``str(exc)`` also names the line.
    """

    def __init__(self, detail: str, *, line_no: int | None = None, line: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.line_no = line_no
        self.line = line

    def locate(self, *, line_no: int | None, line: str) -> None:
        self.line_no = line_no
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.detail
        where = f"failed to parse line '{self.line}': {self.detail}"
        if self.line_no is None:
            return where
        return f"line {self.line_no}: {where}"


class RecordFormatError(LcovError):
    """A line could not be split into a record tag and value."""


class RecordSequenceError(LcovError):
    """A file-scoped record appeared while no file block was open."""


class UnterminatedRecordError(RecordSequenceError):
    """Input ended inside a file block (strict mode only)."""


class RecordValueError(LcovError):
    """A record payload failed its arity or numeric rule."""


__all__ = [
    "ConfigError",
    "LcovError",
    "LcovsumError",
    "RecordFormatError",
    "RecordSequenceError",
    "RecordValueError",
    "UnterminatedRecordError",
]
