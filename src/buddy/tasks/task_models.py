# src/buddy/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

DISPLAY_DATE_FORMAT = "%b %d %Y"


def parse_iso_date(raw: str) -> date:
    """
    Parse a strict `yyyy-mm-dd` date.

    date.fromisoformat alone also accepts compact and week-based forms
    (20240315, 2024-W11-5), which the task file and the deadline command do not.
    Raises ValueError for anything else.
    """
    text = raw.strip()
    if not _ISO_DATE_RE.fullmatch(text):
        raise ValueError(f"not an ISO date (yyyy-mm-dd): {raw!r}")
    return date.fromisoformat(text)


class TaskType(StrEnum):
    """Task variant tag; the value is the type code used in the task file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_code(cls, raw: str | None) -> TaskType | None:
        if not raw:
            return None
        try:
            return cls(raw.strip())
        except ValueError:
            return None


def _require_text(value: str, what: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{what} must be a non-empty string")


@dataclass
class Task:
    """
    Base task: a description plus a completion flag.

    The description is fixed at construction; only the done flag changes.
    Subclasses set `kind` and may add details to the rendered line.
    """

    kind: ClassVar[TaskType]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        _require_text(self.description, "description")

    def __setattr__(self, name: str, value: object) -> None:
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("task description cannot be changed after creation")
        object.__setattr__(self, name, value)

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    def details(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}{self.details()}"


@dataclass
class Todo(Task):
    kind: ClassVar[TaskType] = TaskType.TODO


@dataclass
class Deadline(Task):
    kind: ClassVar[TaskType] = TaskType.DEADLINE

    by: date

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        if not isinstance(self.by, date):
            raise TypeError(f"Deadline.by must be a date, got {type(self.by).__name__}")

    def details(self) -> str:
        return f" (by: {self.by.strftime(DISPLAY_DATE_FORMAT)})"


@dataclass
class Event(Task):
    """Event with free-text start/end (shown to the user as /from and /to)."""

    kind: ClassVar[TaskType] = TaskType.EVENT

    start: str
    end: str

    def __post_init__(self) -> None:
        Task.__post_init__(self)
        _require_text(self.start, "event start")
        _require_text(self.end, "event end")

    def details(self) -> str:
        return f" (from: {self.start} to: {self.end})"
