# src/taskbuddy/core/parser.py

"""
Command parser: one raw input line -> one typed Command.

Grammar (keyword is case-insensitive, split on the first whitespace):

    todo <desc>
    deadline <desc> /by <when>
    event <desc> /from <start> /to <end>
    find <keyword>
    edit <index> [/desc <text>] [/by <when>] [/from <start>] [/to <end>]
    delete | mark | unmark <index>
    list
    bye

<when> is a shortcut (today, tonight, tomorrow, next week, next month) or a
strict d/M/yyyy[ H:mm] date. Event dates given without a time are midnight.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Callable, Sequence
from datetime import date

from ..tasks.task_models import FIELD_BY, FIELD_DESC, FIELD_FROM, FIELD_TO
from .commands import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from .dates import MIDNIGHT, parse_date_time, parse_due_date_time
from .errors import CommandError
from .ports import Clock, ReplyPicker

logger = logging.getLogger(__name__)

ParseHandler = Callable[[str, Clock], Command]

EDIT_FIELDS: tuple[str, ...] = (FIELD_DESC, FIELD_BY, FIELD_FROM, FIELD_TO)

DEFAULT_UNKNOWN_REPLIES: tuple[str, ...] = (
    "Sorry, I don't know what that means.",
    "Hmm, that's not a command I know.",
)

_INDEX_RE = re.compile(r"^[+-]?\d+$")


def parse_index(text: str) -> int:
    """Parse a 1-based task index. Only the shape is checked here, not the bounds."""
    raw = text.strip()
    if not raw:
        raise CommandError("Task index required.")
    if not _INDEX_RE.match(raw):
        raise CommandError(f"Invalid task index: {raw}")
    index = int(raw)
    if index <= 0:
        raise CommandError(f"Invalid task index: {index}")
    return index


def extract_field(text: str, marker: str) -> str | None:
    """
    Value of `marker` inside `text`: from just after the marker up to the next
    other edit marker (or end of string), trimmed. None if absent or blank.
    """
    pos = text.find(marker)
    if pos == -1:
        return None

    value_start = pos + len(marker)
    value_end = len(text)
    for other in EDIT_FIELDS:
        if other == marker:
            continue
        i = text.find(other, value_start)
        if i != -1 and i < value_end:
            value_end = i

    value = text[value_start:value_end].strip()
    return value or None


# ---- per-command parsers ----


def _parse_todo(args: str, today: Clock) -> Command:
    if not args:
        raise CommandError("Todo description required. Usage: todo <description>")
    return AddTodoCommand(args)


def _parse_deadline(args: str, today: Clock) -> Command:
    by = args.find(FIELD_BY)
    desc = (args if by == -1 else args[:by]).strip()
    if not desc:
        raise CommandError("Deadline description required. Usage: deadline <description> /by <when>")

    due_text = "" if by == -1 else args[by + len(FIELD_BY):].strip()
    if not due_text:
        raise CommandError("Due date required. Usage: deadline <description> /by <when>")

    return AddDeadlineCommand(desc, parse_due_date_time(due_text, today=today))


def _parse_event(args: str, today: Clock) -> Command:
    usage = "Usage: event <description> /from <start> /to <end>"
    start_at = args.find(FIELD_FROM)

    # Only /from ends the description; "/to" may appear inside it (e.g. "go/tokyo").
    desc = (args if start_at == -1 else args[:start_at]).strip()
    if not desc:
        raise CommandError(f"Event description required. {usage}")

    if start_at == -1:
        raise CommandError(f"Start time required. {usage}")

    end_at = args.find(FIELD_TO, start_at + len(FIELD_FROM))
    if end_at == -1:
        if FIELD_TO in args[:start_at]:
            raise CommandError(f"{FIELD_FROM} must come before {FIELD_TO}. {usage}")
        raise CommandError(f"End time required. {usage}")

    start_text = args[start_at + len(FIELD_FROM):end_at].strip()
    end_text = args[end_at + len(FIELD_TO):].strip()
    if not start_text:
        raise CommandError(f"Start time required. {usage}")
    if not end_text:
        raise CommandError(f"End time required. {usage}")

    start = parse_date_time(start_text, field_name="start time", default_time=MIDNIGHT)
    end = parse_date_time(end_text, field_name="end time", default_time=MIDNIGHT)
    if not start < end:
        raise CommandError("Start time must be before end time.")

    return AddEventCommand(desc, start, end)


def _parse_find(args: str, today: Clock) -> Command:
    if not args:
        raise CommandError("Search keyword required. Usage: find <keyword>")
    return FindCommand(args)


def _parse_edit(args: str, today: Clock) -> Command:
    pieces = args.split(maxsplit=1)
    index = parse_index(pieces[0] if pieces else "")
    fields = pieces[1] if len(pieces) > 1 else ""

    desc = extract_field(fields, FIELD_DESC)
    by_text = extract_field(fields, FIELD_BY)
    from_text = extract_field(fields, FIELD_FROM)
    to_text = extract_field(fields, FIELD_TO)

    if desc is None and by_text is None and from_text is None and to_text is None:
        raise CommandError("Nothing to change. Use /desc, /by, /from or /to.")

    due = parse_due_date_time(by_text, today=today) if by_text is not None else None
    start = (
        parse_date_time(from_text, field_name="start time", default_time=MIDNIGHT)
        if from_text is not None
        else None
    )
    end = (
        parse_date_time(to_text, field_name="end time", default_time=MIDNIGHT)
        if to_text is not None
        else None
    )

    if start is not None and end is not None and not start < end:
        raise CommandError("Start time must be before end time.")

    return EditCommand(index, description=desc, due=due, start=start, end=end)


def _parse_delete(args: str, today: Clock) -> Command:
    return DeleteCommand(parse_index(args))


def _parse_mark(args: str, today: Clock) -> Command:
    return MarkCommand(parse_index(args))


def _parse_unmark(args: str, today: Clock) -> Command:
    return UnmarkCommand(parse_index(args))


def _parse_list(args: str, today: Clock) -> Command:
    return ListCommand()


def _parse_bye(args: str, today: Clock) -> Command:
    return ExitCommand()


class CommandParser:
    """
    Keyword -> parse handler registry.

    Unknown keywords fail with one of `unknown_replies`, chosen by `picker`
    (random.Random by default; inject a fixed picker for deterministic tests).
    """

    def __init__(
        self,
        *,
        picker: ReplyPicker | None = None,
        today: Clock = date.today,
        unknown_replies: Sequence[str] = DEFAULT_UNKNOWN_REPLIES,
    ) -> None:
        self._handlers: dict[str, ParseHandler] = {}
        self._picker: ReplyPicker = picker if picker is not None else random.Random()
        self._today = today
        self._unknown_replies = tuple(unknown_replies) or DEFAULT_UNKNOWN_REPLIES

        self.register("todo", _parse_todo)
        self.register("deadline", _parse_deadline)
        self.register("event", _parse_event)
        self.register("find", _parse_find)
        self.register("edit", _parse_edit)
        self.register("delete", _parse_delete)
        self.register("mark", _parse_mark)
        self.register("unmark", _parse_unmark)
        self.register("list", _parse_list)
        self.register("bye", _parse_bye)

    def register(self, name: str, handler: ParseHandler) -> None:
        self._handlers[name.lower()] = handler

    @property
    def keywords(self) -> list[str]:
        return list(self._handlers)

    def parse(self, line: str) -> Command:
        parts = line.strip().split(maxsplit=1)
        keyword = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(keyword)
        if handler is None:
            logger.debug("Unknown command keyword %r", keyword)
            raise CommandError(self._picker.choice(self._unknown_replies))

        command = handler(args, self._today)
        logger.debug("Parsed %r -> %r", line, command)
        return command


def parse_command(
    line: str,
    *,
    picker: ReplyPicker | None = None,
    today: Clock = date.today,
) -> Command:
    """One-off convenience wrapper around CommandParser."""
    return CommandParser(picker=picker, today=today).parse(line)
