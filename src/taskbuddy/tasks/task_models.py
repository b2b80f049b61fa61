# src/taskbuddy/tasks/task_models.py

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..core.dates import format_display, format_record, is_midnight
from ..core.errors import CommandError

FIELD_DESC = "/desc"
FIELD_BY = "/by"
FIELD_FROM = "/from"
FIELD_TO = "/to"


class TaskType(StrEnum):
    """Single-letter tag used in records, display strings and the details key."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True, frozen=True)
class EditResult:
    """
    Outcome of Task.edit.

    invalid_fields lists the supplied field markers that do not apply to the
    task's variant (e.g. "/by" on a Todo). They were ignored, not rejected.
    """

    task: Task
    invalid_fields: list[str] = field(default_factory=list)

    @property
    def has_invalid_fields(self) -> bool:
        return bool(self.invalid_fields)


@dataclass(slots=True)
class Task(ABC):
    """
    Shared contract of the three task variants.

    `done` is the only mutable state (mark/unmark). Edits never mutate:
    Task.edit builds a fresh instance that inherits `done`.
    """

    task_type: ClassVar[TaskType]
    # Date field markers this variant accepts in an edit.
    date_fields: ClassVar[tuple[str, ...]] = ()

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise CommandError("Task description required.")

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    # ---- formatting ----

    def to_display_string(self) -> str:
        status = "X" if self.done else " "
        return f"[{self.task_type}][{status}] {self.description}{self._display_suffix()}"

    def to_record_string(self) -> str:
        parts = [str(self.task_type), "1" if self.done else "0", self.description]
        parts.extend(self._record_dates())
        return " | ".join(parts)

    def details_key(self) -> str:
        """Type + description + dates; ignores done-status."""
        dates = [d.isoformat(timespec="minutes") for d in self.dates()]
        return "|".join([str(self.task_type), self.description, *dates])

    def __str__(self) -> str:
        return self.to_display_string()

    # ---- editing ----

    def edit(
        self,
        *,
        description: str | None = None,
        due: datetime | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> EditResult:
        """
        Build an edited copy. Unset fields keep their current values.

        Raises CommandError if the result would be an invalid task
        (e.g. an Event whose start is not before its end).
        """
        supplied = {FIELD_BY: due, FIELD_FROM: start, FIELD_TO: end}
        invalid = [
            name
            for name, value in supplied.items()
            if value is not None and name not in self.date_fields
        ]

        updated = self._rebuild(description or self.description, due=due, start=start, end=end)
        updated.done = self.done
        return EditResult(task=updated, invalid_fields=invalid)

    # ---- variant hooks ----

    def dates(self) -> tuple[datetime, ...]:
        return ()

    def _display_suffix(self) -> str:
        return ""

    def _record_dates(self) -> list[str]:
        return []

    @abstractmethod
    def _rebuild(
        self,
        description: str,
        *,
        due: datetime | None,
        start: datetime | None,
        end: datetime | None,
    ) -> Task: ...


@dataclass(slots=True)
class Todo(Task):
    task_type: ClassVar[TaskType] = TaskType.TODO

    def _rebuild(self, description, *, due, start, end) -> Task:
        return Todo(description)


@dataclass(slots=True)
class Deadline(Task):
    task_type: ClassVar[TaskType] = TaskType.DEADLINE
    date_fields: ClassVar[tuple[str, ...]] = (FIELD_BY,)

    due: datetime

    def dates(self) -> tuple[datetime, ...]:
        return (self.due,)

    def _display_suffix(self) -> str:
        return f" (by: {format_display(self.due, with_time=not is_midnight(self.due))})"

    def _record_dates(self) -> list[str]:
        return [format_record(self.due, with_time=not is_midnight(self.due))]

    def _rebuild(self, description, *, due, start, end) -> Task:
        return Deadline(description, due or self.due)


@dataclass(slots=True)
class Event(Task):
    task_type: ClassVar[TaskType] = TaskType.EVENT
    date_fields: ClassVar[tuple[str, ...]] = (FIELD_FROM, FIELD_TO)

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if not self.start < self.end:
            raise CommandError("Start time must be before end time.")

    def dates(self) -> tuple[datetime, ...]:
        return (self.start, self.end)

    def _with_time(self) -> bool:
        # Times are dropped only when both ends sit exactly on midnight.
        return not (is_midnight(self.start) and is_midnight(self.end))

    def _display_suffix(self) -> str:
        with_time = self._with_time()
        return (
            f" (from: {format_display(self.start, with_time=with_time)}"
            f" to: {format_display(self.end, with_time=with_time)})"
        )

    def _record_dates(self) -> list[str]:
        with_time = self._with_time()
        return [
            format_record(self.start, with_time=with_time),
            format_record(self.end, with_time=with_time),
        ]

    def _rebuild(self, description, *, due, start, end) -> Task:
        return Event(description, start or self.start, end or self.end)
