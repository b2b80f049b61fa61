# src/taskbuddy/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires concrete implementations into AppState (file store, parser, picker),
- loads the task file, turning a failed load into an empty list + load_error.
"""

from __future__ import annotations

import logging
import random

from ..config import get_settings
from ..core.errors import StorageError
from ..core.parser import DEFAULT_UNKNOWN_REPLIES, CommandParser
from ..core.ports import TaskStorage
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, storage: TaskStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        storage = TaskFileStore(settings.tasks_path)

    parser = CommandParser(
        picker=random.Random(getattr(settings, "reply_seed", None)),
        unknown_replies=getattr(settings, "unknown_command_replies", DEFAULT_UNKNOWN_REPLIES),
    )

    load_error: str | None = None
    try:
        tasks = TaskList(storage.load())
    except StorageError as e:
        logger.error("Task load failed, starting with an empty list: %s", e.message)
        tasks = TaskList()
        load_error = e.message

    return AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        parser=parser,
        load_error=load_error,
    )
