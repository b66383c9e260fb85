"""Tests for row coercion and validation."""

from datetime import date, datetime

import pytest

from relnet.domain.entities import (
    EVENTS_HEADERS,
    PEOPLE_HEADERS,
    Person,
    RelationshipEvent,
    ValidationError,
)
from relnet.ingestion.row_parser import coerce_number, coerce_text, parse_rows


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("7", 7),
        (" 8 ", 8),
        ("7.5", 7.5),
        (3.0, 3),
        (4, 4),
        ("abc", 0),
        ("1_000", 0),
        ("", 0),
        (None, 0),
        (float("nan"), 0),
        (True, 1),
    ],
)
def test_coerce_number(value: object, expected: float) -> None:
    assert coerce_number(value) == expected


def test_coerce_text() -> None:
    assert coerce_text(None) == ""
    assert coerce_text(12.0) == "12"
    assert coerce_text(12.5) == "12.5"
    assert coerce_text(datetime(2024, 3, 1)) == "2024-03-01"
    assert coerce_text(datetime(2024, 3, 1, 9, 30)) == "2024-03-01T09:30:00"
    assert coerce_text(date(2024, 3, 1)) == "2024-03-01"


def test_parse_people_rows() -> None:
    errors: list[ValidationError] = []
    rows = [
        ["P1", "Alice", "VP", "Engineering", "9", "High", "Founder"],
        ["P2", "Bob", "Director", "Sales", "abc", "Low", None],
    ]

    people = parse_rows(PEOPLE_HEADERS, rows, "People", errors, Person)

    assert errors == []
    assert [p.id for p in people] == ["P1", "P2"]
    assert people[0].influence == 9
    assert people[0].risk_level == "High"
    assert people[1].influence == 0
    assert people[1].notes == ""


def test_row_without_id_is_rejected() -> None:
    errors: list[ValidationError] = []
    rows = [
        ["P1", "Alice", "VP", "Engineering", 9, "Low", ""],
        [None, "Ghost", "", "", 1, "Low", ""],
        ["", "Blank", "", "", 1, "Low", ""],
    ]

    people = parse_rows(PEOPLE_HEADERS, rows, "People", errors, Person)

    assert len(people) + len(errors) == len(rows)
    assert errors == [
        ValidationError(table="People", row=2, field="ID", message="Missing ID"),
        ValidationError(table="People", row=3, field="ID", message="Missing ID"),
    ]


def test_short_row_yields_empty_cells() -> None:
    errors: list[ValidationError] = []

    events = parse_rows(
        EVENTS_HEADERS, [["E1", "2024-01-01"]], "Events", errors, RelationshipEvent
    )

    assert errors == []
    assert events[0].people_ids == ""
    assert events[0].severity == 0
    assert events[0].impact == ""


def test_numeric_ids_are_stringified() -> None:
    errors: list[ValidationError] = []

    people = parse_rows(["ID", "Name"], [[1.0, "Alice"], [2, "Bob"]], "People", errors, Person)

    assert [p.id for p in people] == ["1", "2"]


def test_unknown_enum_values_pass_through() -> None:
    errors: list[ValidationError] = []

    people = parse_rows(["ID", "RiskLevel"], [["P1", "Extreme"]], "People", errors, Person)

    assert people[0].risk_level == "Extreme"


def test_unknown_columns_are_ignored_and_missing_columns_default() -> None:
    errors: list[ValidationError] = []

    people = parse_rows(["ID", "Shoe Size"], [["P1", "44"]], "People", errors, Person)

    assert people[0].name == ""
    assert people[0].influence == 0


def test_errors_accumulate_across_tables() -> None:
    errors = [ValidationError(table="People", row=1, field="ID", message="Missing ID")]

    parse_rows(EVENTS_HEADERS, [[None] * 7], "Events", errors, RelationshipEvent)

    assert [(e.table, e.row) for e in errors] == [("People", 1), ("Events", 1)]
