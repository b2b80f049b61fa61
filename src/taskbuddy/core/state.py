# src/taskbuddy/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .parser import CommandParser
from .ports import TaskStorage


@dataclass
class AppState:
    # Settings are kept on the state for easy access in other modules.
    settings: object

    tasks: TaskList
    storage: TaskStorage
    parser: CommandParser

    exit_requested: bool = False
    # Message of a failed initial load; the collection then starts empty.
    load_error: str | None = None
