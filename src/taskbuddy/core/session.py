# src/taskbuddy/core/session.py

"""
Transport-agnostic request handling.

Connectors pass raw input lines in and display Reply.message; they stop the
interaction when Reply.exit_requested (or state.exit_requested) is set.
"""

from __future__ import annotations

import logging

from .commands import Reply
from .errors import CommandError
from .state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> Reply:
    """Parse and execute one command line. CommandError becomes an error reply."""
    try:
        command = state.parser.parse(line)
        return command.execute(state)
    except CommandError as e:
        logger.debug("Command failed: %r -> %s", line, e.message)
        return Reply(f"Error: {e.message}")


def welcome_message(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskbuddy"))
    welcome = (
        f"Hi there! {app_name} here.\n"
        f"Commands: {', '.join(state.parser.keywords)}"
    )
    if state.load_error:
        return f"Error loading tasks: {state.load_error}\n{welcome}"
    return welcome
