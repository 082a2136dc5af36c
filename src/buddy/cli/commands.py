# src/buddy/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import cast

from ..core.state import AppState
from ..errors import StorageError, UnknownCommandError
from ..tasks.task_models import Task
from .parser import ParsedCommand, parse_command

CommandHandler = Callable[[AppState, ParsedCommand], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Registration:
    handler: CommandHandler
    help_text: str
    mutating: bool


class CommandRegistry:
    """
    Maps command words to handlers.

    Handlers mutate state.tasks and return the reply text. For commands
    registered as mutating, the registry saves the whole list right after
    the handler returns; read-only commands never touch the file.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Registration] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        mutating: bool = False,
    ) -> None:
        self._commands[name.lower()] = _Registration(handler, help_text, mutating)

    def names(self) -> list[str]:
        return list(self._commands)

    def is_mutating(self, name: str) -> bool:
        reg = self._commands.get(name.lower())
        return bool(reg and reg.mutating)

    def handle(self, state: AppState, line: str) -> str:
        """
        Parse and execute one input line, returning the reply text.

        Raises BuddyError subclasses for invalid input; validation happens
        before any mutation, so a failed command leaves the list untouched.
        """
        parsed = parse_command(line)
        reg = self._commands.get(parsed.word)
        if reg is None:
            raise UnknownCommandError(f"'{parsed.word}' can't be handled here.")

        logger.debug("Handling command %s", parsed.word)
        reply = reg.handler(state, parsed)

        if reg.mutating:
            warning = persist(state)
            if warning:
                reply = f"{reply}\n{warning}"
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, reg in self._commands.items():
            lines.append(f"  {name} - {reg.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def persist(state: AppState) -> str | None:
    """Save the full list; return a warning for the user if the write failed."""
    try:
        state.store.save_tasks(state.tasks.all_tasks())
    except StorageError as e:
        logger.info("Save failed, keeping in-memory tasks: %s", e)
        return f"Warning: {e.message} Your tasks are still here for this session."
    return None


def _numbered(tasks: Sequence[Task]) -> list[str]:
    return [f"{i}. {t}" for i, t in enumerate(tasks, start=1)]


def _added_reply(task: Task, size: int) -> str:
    return f"Got it! I've added '{task}' to your pile.\nYou now have {size} things on your list!"


def cmd_list(state: AppState, cmd: ParsedCommand) -> str:
    tasks = state.tasks.all_tasks()
    if not tasks:
        return "Your list is empty, woof! Add something with todo, deadline or event."
    return "\n".join(["Here are the tasks in your list:", *_numbered(tasks)])


def cmd_mark(state: AppState, cmd: ParsedCommand) -> str:
    task = state.tasks.mark(cast(int, cmd.index))
    return f"Awesome! I've checked this off your list:\n  {task}"


def cmd_unmark(state: AppState, cmd: ParsedCommand) -> str:
    task = state.tasks.unmark(cast(int, cmd.index))
    return f"No problem, I've put this back on the list for you:\n  {task}"


def cmd_add(state: AppState, cmd: ParsedCommand) -> str:
    """Shared by todo/deadline/event: the parser already built the task."""
    task = cast(Task, cmd.task)
    state.tasks.add(task)
    return _added_reply(task, state.tasks.size())


def cmd_delete(state: AppState, cmd: ParsedCommand) -> str:
    task = state.tasks.remove(cast(int, cmd.index))
    return f"Noted. I've removed this task:\n  {task}\nNow you have {state.tasks.size()} tasks in the list."


def cmd_find(state: AppState, cmd: ParsedCommand) -> str:
    keyword = cast(str, cmd.keyword)
    matches = state.tasks.find(keyword)
    if not matches:
        return f"I couldn't find any tasks containing {keyword}!"
    return "\n".join([f"Here are the tasks containing {keyword} in your list:", *_numbered(matches)])


registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <n>.", mutating=True)
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark <n>.", mutating=True)
registry.register("todo", cmd_add, help_text="Add a to-do: todo <desc>.", mutating=True)
registry.register(
    "deadline", cmd_add, help_text="Add a deadline: deadline <desc> /by <yyyy-mm-dd>.", mutating=True
)
registry.register(
    "event", cmd_add, help_text="Add an event: event <desc> /from <start> /to <end>.", mutating=True
)
registry.register("delete", cmd_delete, help_text="Remove a task: delete <n>.", mutating=True)
registry.register("find", cmd_find, help_text="Search descriptions: find <keyword>.")
