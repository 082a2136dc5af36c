# src/buddy/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import StorageError
from .task_models import Deadline, Event, Task, TaskType, Todo, parse_iso_date

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " | "
DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


def format_task(task: Task) -> str:
    """
    Render one task as a task-file line: `TYPE | DONE | DESCRIPTION [| EXTRA...]`.

    Fields are not escaped: a description containing " | " will not survive a
    reload intact.
    """
    fields = [str(task.kind), DONE_FLAG if task.is_done else NOT_DONE_FLAG, task.description]
    if isinstance(task, Deadline):
        fields.append(task.by.isoformat())
    elif isinstance(task, Event):
        fields.extend([task.start, task.end])
    return FIELD_SEPARATOR.join(fields)


def parse_task_line(line: str) -> Task | None:
    """
    Parse one task-file line.

    Returns None for lines that are silently ignored (too few fields, unknown
    type code). Raises ValueError for a recognised record whose payload is
    corrupt (bad date, missing event fields, blank description).
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        return None

    kind = TaskType.from_code(parts[0])
    if kind is None:
        return None

    description = parts[2]
    task: Task
    if kind is TaskType.TODO:
        task = Todo(description)
    elif kind is TaskType.DEADLINE:
        if len(parts) < 4:
            raise ValueError("deadline record has no date")
        task = Deadline(description, parse_iso_date(parts[3]))
    else:
        if len(parts) < 5:
            raise ValueError("event record needs both /from and /to")
        task = Event(description, parts[3], parts[4])

    if parts[1].strip() == DONE_FLAG:
        task.mark_done()
    return task


class TaskStore:
    """
    Flat-file task store.

    The whole list is rewritten on every save; each call opens and closes
    the file, no handle is kept between commands.
    """

    def __init__(self, file_path: str | Path = "data/buddy.txt") -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def ensure_file(self) -> None:
        """Create the data directory and an empty task file if they are missing."""
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            if not self._file_path.exists():
                self._file_path.touch()
                logger.info("Created empty task file %s", self._file_path)
        except OSError as e:
            raise StorageError(f"I couldn't create the task file {self._file_path}: {e}") from e

    def load_tasks(self) -> list[Task]:
        self.ensure_file()
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"File reading failed for {self._file_path}: {e}") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(text.splitlines(), start=1):
            try:
                task = parse_task_line(line)
            except (ValueError, TypeError) as e:
                skipped += 1
                logger.warning(
                    "Skipping corrupted record at %s:%d (%s): %r", self._file_path, lineno, e, line
                )
                continue
            if task is None:
                if line.strip():
                    logger.debug("Ignoring unrecognised line %s:%d: %r", self._file_path, lineno, line)
                continue
            tasks.append(task)

        logger.info("Loaded %d task(s) from %s (skipped=%d)", len(tasks), self._file_path, skipped)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        lines = [format_task(t) + "\n" for t in tasks]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("w", encoding="utf-8") as f:
                f.writelines(lines)
        except OSError as e:
            raise StorageError(f"Whimper... I couldn't save your tasks to {self._file_path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(lines), self._file_path)
