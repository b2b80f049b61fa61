# src/taskbuddy/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Components get settings injected; only the entry point calls get_settings().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.parser import DEFAULT_UNKNOWN_REPLIES

ENV_PREFIX = "TASKBUDDY"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...], sep: str = ";") -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return tuple(default)
    parts = tuple(p.strip() for p in raw.split(sep) if p.strip())
    return parts or tuple(default)


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    # ---- Parser ----
    unknown_command_replies: tuple[str, ...]
    reply_seed: int | None

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "taskbuddy").strip() or "taskbuddy"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")

        unknown_command_replies = _env_list(_k("UNKNOWN_REPLIES"), DEFAULT_UNKNOWN_REPLIES)
        reply_seed = _env_int(_k("REPLY_SEED"), None)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
            unknown_command_replies=unknown_command_replies,
            reply_seed=reply_seed,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
