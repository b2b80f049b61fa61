# src/taskbuddy/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core import dates
from ..core.errors import CommandError, StorageError
from .task_models import Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

SEP = " | "


def parse_record(line: str) -> Task:
    """
    Parse one record line:

        T | 0 | desc
        D | 1 | desc | dd/MM/yyyy[ HH:mm]
        E | 0 | desc | dd/MM/yyyy[ HH:mm] | dd/MM/yyyy[ HH:mm]

    Date fields are taken from the end, so a description may itself contain " | ".
    Raises ValueError (or CommandError for an invalid event range) on bad input.
    """
    parts = line.rstrip("\r\n").split(SEP, 2)
    if len(parts) < 3:
        raise ValueError("expected at least 3 fields")

    tag, flag, rest = parts[0].strip(), parts[1].strip(), parts[2]
    if flag not in ("0", "1"):
        raise ValueError(f"invalid done flag: {flag!r}")

    try:
        task_type = TaskType(tag)
    except ValueError:
        raise ValueError(f"invalid task type: {tag!r}") from None

    task: Task
    if task_type is TaskType.TODO:
        task = Todo(rest)
    elif task_type is TaskType.DEADLINE:
        fields = rest.rsplit(SEP, 1)
        if len(fields) < 2:
            raise ValueError("deadline record needs a due date")
        desc, due = fields
        task = Deadline(desc, dates.parse_record(due))
    else:
        fields = rest.rsplit(SEP, 2)
        if len(fields) < 3:
            raise ValueError("event record needs a start and an end")
        desc, start, end = fields
        task = Event(desc, dates.parse_record(start), dates.parse_record(end))

    task.done = flag == "1"
    return task


class TaskFileStore:
    """
    Flat-file task storage: one record per line, UTF-8.

    - load(): missing file -> empty list; any bad line fails the whole load
    - save(): rewrites the whole file (temp file + os.replace)
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            raise StorageError(f"Failed loading tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        # Records are "\n"-terminated; other line breaks may appear inside descriptions.
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(parse_record(line))
            except (ValueError, CommandError) as e:
                raise StorageError(f"Corrupted line {lineno}: {line} ({e})") from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_record_string() + "\n" for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), "utf-8", newline="\n")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Failed saving tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
