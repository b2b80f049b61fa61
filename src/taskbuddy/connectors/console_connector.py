# src/taskbuddy/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..core.session import handle_line, welcome_message
from ..core.state import AppState

logger = logging.getLogger(__name__)

INDENT = "    "
LINE = "_" * 60
PROMPT = ">>> "


def _print_block(out: TextIO, text: str) -> None:
    out.write(LINE + "\n")
    for line in text.splitlines():
        out.write(f"{INDENT}{line}\n")
    out.write(LINE + "\n")
    out.flush()


def _read_line(input_stream: TextIO | None) -> str | None:
    """Next input line, or None on EOF."""
    if input_stream is None:
        try:
            return input(PROMPT)
        except EOFError:
            return None
    line = input_stream.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def run_console_loop(
    state: AppState,
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
) -> None:
    """
    Read commands line by line and print one reply block per command.

    input_stream=None reads interactively via input(); output defaults to stdout.
    Stops on `bye`, EOF or Ctrl+C.
    """
    out = output if output is not None else sys.stdout
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    _print_block(out, welcome_message(state))

    while not state.exit_requested:
        try:
            raw = _read_line(input_stream)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out.write("\n")
            break

        if raw is None:
            logger.info("Console EOF received, exiting.")
            break

        user_input = raw.strip()
        if not user_input:
            continue

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            _print_block(out, "Internal error while handling a command.")
            continue

        _print_block(out, reply.message)
        if reply.exit_requested:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
