# src/taskbuddy/core/errors.py

from __future__ import annotations


class CommandError(Exception):
    """
    User-facing failure of a single command.

    The message is shown to the user as-is; the command loop keeps running.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskIndexError(CommandError):
    """1-based task index outside the current collection."""

    def __init__(self, index: int, size: int) -> None:
        noun = "task" if size == 1 else "tasks"
        super().__init__(f"Task index out of bounds: {index} (you have {size} {noun}).")
        self.index = index
        self.size = size


class StorageError(CommandError):
    """Task file could not be read or written."""
