from __future__ import annotations

import pytest

from lcovsum.core.records import Record, RecordKind, tokenize
from lcovsum.errors import RecordFormatError


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("TN:TestName", Record(RecordKind.TEST_NAME, "TestName")),
        ("SF:/path/to/file.go", Record(RecordKind.SOURCE_FILE, "/path/to/file.go")),
        ("DA:1,5", Record(RecordKind.LINE_DATA, "1,5")),
        ("FNDA:3,main", Record(RecordKind.FUNCTION_DATA, "3,main")),
        ("BRDA:10,2,1,-", Record(RecordKind.BRANCH_DATA, "10,2,1,-")),
        ("end_of_record", Record(RecordKind.END_OF_RECORD, "")),
        # only the first colon separates tag and value
        ("DA:1:5", Record(RecordKind.LINE_DATA, "1:5")),
        ("SF:C:/work/file.c", Record(RecordKind.SOURCE_FILE, "C:/work/file.c")),
        # empty values are left for later stages to reject
        ("SF:", Record(RecordKind.SOURCE_FILE, "")),
        ("FN:", Record(RecordKind.FUNCTION_NAME, "")),
        (":", Record("", "")),
    ],
)
def test_tokenize_valid(line: str, expected: Record) -> None:
    assert tokenize(line) == expected


def test_tokenize_returns_enum_members_for_known_tags() -> None:
    record = tokenize("LF:12")
    assert record.kind is RecordKind.LINES_FOUND
    assert record.known


def test_tokenize_preserves_unknown_tags() -> None:
    record = tokenize("FNF:2")
    assert record == Record("FNF", "2")
    assert not record.known
    assert tokenize("VER:2").kind == "VER"


@pytest.mark.parametrize("line", ["end_of_recordx", "garbage", "DA 1,5"])
def test_tokenize_rejects_lines_without_colon(line: str) -> None:
    with pytest.raises(RecordFormatError, match=f"invalid record format: {line}"):
        tokenize(line)
