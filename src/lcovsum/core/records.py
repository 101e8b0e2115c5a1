"""Tokenizer for single LCOV lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from lcovsum.errors import RecordFormatError


class RecordKind(StrEnum):
    """Record tags understood by the aggregator."""

    TEST_NAME = "TN"
    SOURCE_FILE = "SF"
    LINE_DATA = "DA"
    LINES_FOUND = "LF"
    LINES_HIT = "LH"
    FUNCTION_NAME = "FN"
    FUNCTION_DATA = "FNDA"
    BRANCH_DATA = "BRDA"
    BRANCH_FOUND = "BRF"
    BRANCH_HIT = "BRH"
    END_OF_RECORD = "end_of_record"


# record kinds that need an open file block
FILE_SCOPED: frozenset[str] = frozenset({
    RecordKind.LINE_DATA,
    RecordKind.LINES_FOUND,
    RecordKind.LINES_HIT,
    RecordKind.FUNCTION_NAME,
    RecordKind.FUNCTION_DATA,
    RecordKind.BRANCH_DATA,
    RecordKind.BRANCH_FOUND,
    RecordKind.BRANCH_HIT,
})

_KNOWN_TAGS: frozenset[str] = frozenset(kind.value for kind in RecordKind)


@dataclass(frozen=True, slots=True)
class Record:
    """One tokenized line: a tag and everything after its first colon.

    ``kind`` is left as a plain string so unknown tags survive tokenizing;
    compare it against :class:`RecordKind` members.
    """

    kind: str
    value: str = ""

    @property
    def known(self) -> bool:
        return self.kind in _KNOWN_TAGS


def tokenize(line: str) -> Record:
    """Split a trimmed, non-empty LCOV line into a :class:`Record`.

    Only the first colon separates tag from value, so ``DA:1:5`` yields the
    value ``"1:5"``. An empty value is accepted here.
    """
    if line == RecordKind.END_OF_RECORD:
        return Record(RecordKind.END_OF_RECORD, "")
    tag, sep, value = line.partition(":")
    if not sep:
        msg = f"invalid record format: {line}"
        raise RecordFormatError(msg)
    if tag in _KNOWN_TAGS:
        return Record(RecordKind(tag), value)
    return Record(tag, value)


__all__ = ["FILE_SCOPED", "Record", "RecordKind", "tokenize"]
