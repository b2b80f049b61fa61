# src/taskbuddy/core/dates.py

"""
Date handling shared by the parser, the task model and the file store.

Three formats are involved:
- command input: d/M/yyyy or d/M/yyyy H:mm (strict calendar, no roll-over)
- record (file): dd/MM/yyyy or dd/MM/yyyy HH:mm
- display: d MMM yyyy or d MMM yyyy at HH:mm

The time part is omitted from record/display output only when the caller says so
(midnight rules differ per task variant, see task_models).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

from .errors import CommandError

MIDNIGHT = time(0, 0)
END_OF_DAY = time(23, 59)

# Fixed English abbreviations so display output does not depend on the process locale.
MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_INPUT_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:\s+(\d{1,2}):(\d{2}))?$")
_RECORD_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})(?: (\d{2}):(\d{2}))?$")

Today = Callable[[], date]

_SHORTCUTS: dict[str, Callable[[date], date]] = {
    "today": lambda d: d,
    "tonight": lambda d: d,
    "tomorrow": lambda d: d + timedelta(days=1),
    "next week": lambda d: d + timedelta(weeks=1),
    "next month": lambda d: d + relativedelta(months=1),
}


def _build(m: re.Match[str], default_time: time) -> datetime | None:
    day, month, year, hour, minute = m.groups()
    try:
        if hour is None:
            return datetime.combine(date(int(year), int(month), int(day)), default_time)
        return datetime(int(year), int(month), int(day), int(hour), int(minute))
    except ValueError:
        # 30/2, 31/4, 25:00 ... are rejected, never rolled over.
        return None


def parse_date_time(text: str, *, field_name: str, default_time: time) -> datetime:
    """
    Parse d/M/yyyy[ H:mm].

    default_time is used when only a date is given.
    Raises CommandError("Invalid <field_name>: <text>") on anything else.
    """
    raw = text.strip()
    m = _INPUT_RE.match(raw)
    value = _build(m, default_time) if m else None
    if value is None:
        raise CommandError(f"Invalid {field_name}: {raw}")
    return value


def parse_due_date_time(text: str, *, today: Today = date.today) -> datetime:
    """Resolve a due-date shortcut (today, tomorrow, next week, ...) or a strict date."""
    key = " ".join(text.lower().split())
    shift = _SHORTCUTS.get(key)
    if shift is not None:
        return datetime.combine(shift(today()), END_OF_DAY)
    return parse_date_time(text, field_name="due date", default_time=END_OF_DAY)


def is_midnight(value: datetime) -> bool:
    return value.time() == MIDNIGHT


def format_record(value: datetime, *, with_time: bool) -> str:
    text = f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
    if with_time:
        text += f" {value.hour:02d}:{value.minute:02d}"
    return text


def parse_record(text: str) -> datetime:
    """Inverse of format_record. A date-only value loads as midnight."""
    m = _RECORD_RE.match(text.strip())
    value = _build(m, MIDNIGHT) if m else None
    if value is None:
        raise ValueError(f"malformed date: {text!r}")
    return value


def format_display(value: datetime, *, with_time: bool) -> str:
    text = f"{value.day} {MONTH_ABBR[value.month - 1]} {value.year}"
    if with_time:
        text += f" at {value.hour:02d}:{value.minute:02d}"
    return text
