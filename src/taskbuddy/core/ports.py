# src/taskbuddy/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and sources of randomness/time swappable and makes testing easier.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Whole-collection persistence (last write wins)."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class ReplyPicker(Protocol):
    """
    Chooses one of several canned replies.

    random.Random satisfies this; tests inject a deterministic picker.
    """

    def choice(self, seq: Sequence[str]) -> str: ...


class Clock(Protocol):
    """Provides "today" for due-date shortcuts."""

    def __call__(self) -> date: ...
