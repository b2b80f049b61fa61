# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from taskbuddy.core.dates import (
    END_OF_DAY,
    MIDNIGHT,
    format_display,
    format_record,
    parse_date_time,
    parse_due_date_time,
    parse_record,
)
from taskbuddy.core.errors import CommandError


def test_parse_date_time_accepts_short_and_padded_forms() -> None:
    assert parse_date_time("6/8/2024", field_name="x", default_time=MIDNIGHT) == datetime(2024, 8, 6)
    assert parse_date_time("06/08/2024 9:05", field_name="x", default_time=MIDNIGHT) == datetime(
        2024, 8, 6, 9, 5
    )
    assert parse_date_time(" 1/1/2025 ", field_name="x", default_time=END_OF_DAY) == datetime(
        2025, 1, 1, 23, 59
    )


@pytest.mark.parametrize(
    "text",
    ["30/2/2024", "31/4/2024", "29/2/2023", "32/13/2024", "1/1/2024 24:00", "1/1/2024 9:60",
     "2024-01-01", "1/1/24", "tomorrow", ""],
)
def test_parse_date_time_is_strict(text: str) -> None:
    with pytest.raises(CommandError, match="Invalid start time"):
        parse_date_time(text, field_name="start time", default_time=MIDNIGHT)


def test_leap_day_is_accepted() -> None:
    assert parse_date_time("29/2/2024 18:00", field_name="x", default_time=MIDNIGHT) == datetime(
        2024, 2, 29, 18, 0
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("today", datetime(2024, 1, 31, 23, 59)),
        ("Tonight", datetime(2024, 1, 31, 23, 59)),
        ("tomorrow", datetime(2024, 2, 1, 23, 59)),
        ("next  week", datetime(2024, 2, 7, 23, 59)),
        ("NEXT MONTH", datetime(2024, 2, 29, 23, 59)),
        ("1/2/2024", datetime(2024, 2, 1, 23, 59)),
        ("1/2/2024 8:00", datetime(2024, 2, 1, 8, 0)),
    ],
)
def test_parse_due_date_time_shortcuts(text: str, expected: datetime) -> None:
    assert parse_due_date_time(text, today=lambda: date(2024, 1, 31)) == expected


def test_parse_due_date_time_rejects_garbage() -> None:
    with pytest.raises(CommandError, match="Invalid due date: someday"):
        parse_due_date_time("someday")


def test_record_format() -> None:
    value = datetime(2024, 2, 9, 7, 5)
    assert format_record(value, with_time=True) == "09/02/2024 07:05"
    assert format_record(value, with_time=False) == "09/02/2024"
    assert parse_record("09/02/2024 07:05") == value
    assert parse_record("09/02/2024") == datetime(2024, 2, 9)

    with pytest.raises(ValueError):
        parse_record("9/2/2024")
    with pytest.raises(ValueError):
        parse_record("30/02/2024")


def test_display_format() -> None:
    value = datetime(2024, 12, 1, 18, 0)
    assert format_display(value, with_time=True) == "1 Dec 2024 at 18:00"
    assert format_display(value, with_time=False) == "1 Dec 2024"
