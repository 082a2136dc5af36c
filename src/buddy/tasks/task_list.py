# src/buddy/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, index-addressable task collection (the session's in-memory state).

    Indices are 0-based here; the parser already translated the user's
    1-based task numbers. Every index-taking method validates before mutating.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    # ---- internal ----

    def _validate_index(self, index: int, action: str) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks), action)

    # ---- operations ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added: %s (size=%d)", task, len(self._tasks))

    def get(self, index: int) -> Task:
        self._validate_index(index, "find")
        return self._tasks[index]

    def mark(self, index: int) -> Task:
        self._validate_index(index, "mark")
        task = self._tasks[index]
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        self._validate_index(index, "unmark")
        task = self._tasks[index]
        task.mark_undone()
        return task

    def remove(self, index: int) -> Task:
        self._validate_index(index, "delete")
        task = self._tasks.pop(index)
        logger.debug("Task removed: %s (size=%d)", task, len(self._tasks))
        return task

    def find(self, keyword: str) -> list[Task]:
        """Case-insensitive substring search on descriptions, in list order."""
        needle = keyword.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]
