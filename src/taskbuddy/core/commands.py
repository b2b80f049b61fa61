# src/taskbuddy/core/commands.py

"""
Typed commands produced by the parser.

Each command is applied to AppState via execute(), which:
- validates against the current collection (bounds, duplicates),
- mutates state.tasks and persists through state.storage when something changed,
- returns a Reply for the presentation layer.

Failures raise CommandError; nothing is persisted for a failed command.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..tasks.task_models import Deadline, Event, Task, Todo
from .errors import CommandError

if TYPE_CHECKING:
    from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Reply:
    message: str
    exit_requested: bool = False


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def _persist(state: AppState) -> None:
    state.storage.save(state.tasks)


class Command(ABC):
    """One validated user intent."""

    @abstractmethod
    def execute(self, state: AppState) -> Reply: ...


# ---- add ----


class AddCommand(Command):
    @abstractmethod
    def build_task(self) -> Task: ...

    def execute(self, state: AppState) -> Reply:
        task = self.build_task()
        if state.tasks.contains_details(task):
            raise CommandError(f"This task already exists: {task}")

        state.tasks.add(task)
        _persist(state)
        logger.info("Added task %s (total=%d)", task.details_key(), len(state.tasks))
        return Reply(
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(state.tasks))} in the list."
        )


@dataclass(slots=True, frozen=True)
class AddTodoCommand(AddCommand):
    description: str

    def build_task(self) -> Task:
        return Todo(self.description)


@dataclass(slots=True, frozen=True)
class AddDeadlineCommand(AddCommand):
    description: str
    due: datetime

    def build_task(self) -> Task:
        return Deadline(self.description, self.due)


@dataclass(slots=True, frozen=True)
class AddEventCommand(AddCommand):
    description: str
    start: datetime
    end: datetime

    def build_task(self) -> Task:
        return Event(self.description, self.start, self.end)


# ---- index-based ----


@dataclass(slots=True, frozen=True)
class DeleteCommand(Command):
    index: int

    def execute(self, state: AppState) -> Reply:
        task = state.tasks.remove(self.index)
        _persist(state)
        logger.info("Deleted task #%d %s", self.index, task.details_key())
        return Reply(
            "Noted. I've removed this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(state.tasks))} in the list."
        )


@dataclass(slots=True, frozen=True)
class MarkCommand(Command):
    index: int

    def execute(self, state: AppState) -> Reply:
        task = state.tasks.get(self.index)
        if task.done:
            return Reply("That task is already marked as done.")

        task.mark()
        _persist(state)
        logger.info("Marked task #%d as done", self.index)
        return Reply(f"Nice! I've marked this task as done:\n  {task}")


@dataclass(slots=True, frozen=True)
class UnmarkCommand(Command):
    index: int

    def execute(self, state: AppState) -> Reply:
        task = state.tasks.get(self.index)
        if not task.done:
            return Reply("That task is already not done.")

        task.unmark()
        _persist(state)
        logger.info("Marked task #%d as not done", self.index)
        return Reply(f"OK, I've marked this task as not done yet:\n  {task}")


@dataclass(slots=True, frozen=True)
class EditCommand(Command):
    index: int
    description: str | None = None
    due: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None

    def execute(self, state: AppState) -> Reply:
        old = state.tasks.get(self.index)
        result = old.edit(
            description=self.description,
            due=self.due,
            start=self.start,
            end=self.end,
        )
        updated = result.task

        if state.tasks.contains_details_excluding(updated, self.index):
            raise CommandError(f"This task already exists: {updated}")

        state.tasks.set(self.index, updated)
        _persist(state)
        logger.info("Edited task #%d -> %s", self.index, updated.details_key())

        message = f"Got it, I've updated the task:\n  {updated}"
        if result.has_invalid_fields:
            message += (
                "\nIgnored (not applicable to this task type): "
                + ", ".join(result.invalid_fields)
            )
        return Reply(message)


# ---- read-only ----


@dataclass(slots=True, frozen=True)
class FindCommand(Command):
    keyword: str

    def execute(self, state: AppState) -> Reply:
        matches = state.tasks.find(self.keyword)
        if not len(matches):
            return Reply("No matching tasks.")
        return Reply("\n".join(["Here are the matching tasks in your list:", *matches.numbered_lines()]))


@dataclass(slots=True, frozen=True)
class ListCommand(Command):
    def execute(self, state: AppState) -> Reply:
        if not len(state.tasks):
            return Reply("Your list is empty.")
        return Reply("\n".join(["Here are the tasks in your list:", *state.tasks.numbered_lines()]))


@dataclass(slots=True, frozen=True)
class ExitCommand(Command):
    def execute(self, state: AppState) -> Reply:
        state.exit_requested = True
        return Reply("Bye. Hope to see you again soon!", exit_requested=True)
