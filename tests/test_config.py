# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbuddy.config import DEFAULT_UNKNOWN_REPLIES, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "TASKBUDDY_APP_NAME",
        "TASKBUDDY_LOG_LEVEL",
        "TASKBUDDY_LOG_TO_FILE",
        "TASKBUDDY_DATA_DIR",
        "TASKBUDDY_TASKS_PATH",
        "TASKBUDDY_LOG_DIR",
        "TASKBUDDY_UNKNOWN_REPLIES",
        "TASKBUDDY_REPLY_SEED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskbuddy"
    assert s.tasks_path == Path("data") / "tasks.txt"
    assert s.log_dir == Path("data") / "logs"
    assert s.unknown_command_replies == DEFAULT_UNKNOWN_REPLIES
    assert s.reply_seed is None
    assert s.log_to_file is True


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBUDDY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKBUDDY_UNKNOWN_REPLIES", "what?; say again ;")
    monkeypatch.setenv("TASKBUDDY_REPLY_SEED", "42")
    monkeypatch.setenv("TASKBUDDY_LOG_TO_FILE", "off")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.unknown_command_replies == ("what?", "say again")
    assert s.reply_seed == 42
    assert s.log_to_file is False


def test_bad_seed_falls_back_to_none(monkeypatch) -> None:
    monkeypatch.setenv("TASKBUDDY_REPLY_SEED", "not-a-number")
    assert Settings.from_env().reply_seed is None


def test_default_replies_come_from_parser() -> None:
    from taskbuddy.core import parser

    assert DEFAULT_UNKNOWN_REPLIES is parser.DEFAULT_UNKNOWN_REPLIES
    assert Settings.from_env().unknown_command_replies == parser.DEFAULT_UNKNOWN_REPLIES
