# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbuddy.config import DEFAULT_UNKNOWN_REPLIES
from taskbuddy.core.parser import CommandParser
from taskbuddy.core.state import AppState
from taskbuddy.tasks.task_list import TaskList

from .fakes import FakeStorage, FixedClock, FixedPicker

TODAY = date(2024, 1, 31)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskbuddy",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "data" / "tasks.txt",
        log_dir=tmp_path / "logs",
        unknown_command_replies=DEFAULT_UNKNOWN_REPLIES,
        reply_seed=7,
    )


@pytest.fixture()
def picker() -> FixedPicker:
    return FixedPicker()


@pytest.fixture()
def parser(picker: FixedPicker) -> CommandParser:
    return CommandParser(picker=picker, today=FixedClock(TODAY))


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FakeStorage, parser: CommandParser) -> AppState:
    """AppState with an empty task list, in-memory storage and a fixed clock."""
    return AppState(
        settings=settings,
        tasks=TaskList(),
        storage=storage,
        parser=parser,
    )
