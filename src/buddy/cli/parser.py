# src/buddy/cli/parser.py

"""
Command parser: raw input line -> command word + validated arguments.

Every function either returns fully validated values or raises a BuddyError
subclass; nothing here touches the task list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import InvalidDateError, InvalidIndexError, MissingArgumentError, UnknownCommandError
from ..tasks.task_models import Deadline, Event, Task, Todo, parse_iso_date

COMMAND_WORDS: tuple[str, ...] = (
    "list",
    "mark",
    "unmark",
    "todo",
    "deadline",
    "event",
    "delete",
    "find",
    "bye",
)

BY_SEPARATOR = " /by "
EVENT_SPLIT_RE = re.compile(r" /from | /to ")
INDEX_RE = re.compile(r"[+-]?[0-9]+")

TODO_FORMAT = "todo [name]"
DEADLINE_FORMAT = "deadline [name] /by yyyy-mm-dd"
EVENT_FORMAT = "event [name] /from [start] /to [end]"
FIND_FORMAT = "find [keyword]"


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    word: str
    index: int | None = None
    task: Task | None = None
    keyword: str | None = None


def get_command_word(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0].lower() if parts else ""


def _body(line: str) -> str:
    """Everything after the command word, leading whitespace kept."""
    stripped = line.strip()
    parts = stripped.split(maxsplit=1)
    if not parts:
        return ""
    return stripped[len(parts[0]) :]


def parse_todo(line: str) -> Todo:
    description = _body(line).strip()
    if not description:
        raise MissingArgumentError(f"What am I supposed to do?? Missing description. Format: {TODO_FORMAT}")
    return Todo(description)


def parse_deadline(line: str) -> Deadline:
    body = _body(line)
    if BY_SEPARATOR not in body:
        if body.endswith(" /by"):
            raise MissingArgumentError(
                f"Please fill in the description and deadline time!! Format: {DEADLINE_FORMAT}"
            )
        raise MissingArgumentError(
            f"When am I supposed to do this by?? Missing /by clause. Format: {DEADLINE_FORMAT}"
        )
    description, _, raw_date = body.partition(BY_SEPARATOR)
    description = description.strip()
    raw_date = raw_date.strip()
    if not description or not raw_date:
        raise MissingArgumentError(
            f"Please fill in the description and deadline time!! Format: {DEADLINE_FORMAT}"
        )
    try:
        by = parse_iso_date(raw_date)
    except ValueError as e:
        raise InvalidDateError(
            f"'{raw_date}' is not a date I understand, woof! Use yyyy-mm-dd. Format: {DEADLINE_FORMAT}"
        ) from e
    return Deadline(description, by)


def parse_event(line: str) -> Event:
    body = _body(line)
    if " /from" not in body or " /to" not in body:
        raise MissingArgumentError(f"Missing /from or /to. Format: {EVENT_FORMAT}")
    parts = [p.strip() for p in EVENT_SPLIT_RE.split(body, maxsplit=2)]
    if len(parts) < 3 or not all(parts):
        raise MissingArgumentError(f"Your event is missing details! Format: {EVENT_FORMAT}")
    description, start, end = parts
    return Event(description, start, end)


def parse_task_index(line: str, command: str) -> int:
    """
    Parse the task number for mark/unmark/delete and return it 0-based.

    Only syntax is checked here; whether the task exists is up to TaskList.
    """
    raw = _body(line).strip()
    if not raw:
        raise MissingArgumentError(
            f"Which task number am I {command}ing? No task number supplied. Format: {command} [number]"
        )
    if not INDEX_RE.fullmatch(raw):
        raise InvalidIndexError(
            f"I need a number to {command} the task, not words! '{raw}' is not a number. "
            f"Format: {command} [number]"
        )
    return int(raw) - 1


def parse_find_keyword(line: str) -> str:
    keyword = _body(line).strip()
    if not keyword:
        raise MissingArgumentError(f"What am I looking for?? Missing keyword. Format: {FIND_FORMAT}")
    return keyword


def parse_command(line: str) -> ParsedCommand:
    word = get_command_word(line)

    if word in ("list", "bye"):
        return ParsedCommand(word)
    if word in ("mark", "unmark", "delete"):
        return ParsedCommand(word, index=parse_task_index(line, word))
    if word == "todo":
        return ParsedCommand(word, task=parse_todo(line))
    if word == "deadline":
        return ParsedCommand(word, task=parse_deadline(line))
    if word == "event":
        return ParsedCommand(word, task=parse_event(line))
    if word == "find":
        return ParsedCommand(word, keyword=parse_find_keyword(line))

    valid = ", ".join(f"'{w}'" for w in COMMAND_WORDS)
    raise UnknownCommandError(f"Whimper... I don't recognize that command. Try one of: {valid}!")
