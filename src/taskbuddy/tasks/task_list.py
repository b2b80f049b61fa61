# src/taskbuddy/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered task collection with 1-based external indexing.

    Every indexed access is bounds-checked and raises TaskIndexError.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    @property
    def size(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check_index(index))

    def get(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def set(self, index: int, task: Task) -> Task:
        """Replace the task at `index`, returning the previous one."""
        i = self._check_index(index)
        old = self._tasks[i]
        self._tasks[i] = task
        return old

    def find(self, keyword: str) -> TaskList:
        needle = keyword.lower()
        return TaskList(t for t in self._tasks if needle in t.description.lower())

    def contains_details(self, task: Task) -> bool:
        key = task.details_key()
        return any(t.details_key() == key for t in self._tasks)

    def contains_details_excluding(self, task: Task, index: int) -> bool:
        """Like contains_details, but ignores the task at 1-based `index`."""
        key = task.details_key()
        return any(
            t.details_key() == key
            for i, t in enumerate(self._tasks, start=1)
            if i != index
        )

    def numbered_lines(self) -> list[str]:
        return [f"{i}.{t.to_display_string()}" for i, t in enumerate(self._tasks, start=1)]
