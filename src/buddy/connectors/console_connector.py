# src/buddy/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.parser import get_command_word
from ..core.state import AppState
from ..errors import BuddyError

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "_" * 60

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def _print_block(write: Write, text: str) -> None:
    write(HORIZONTAL_LINE)
    write(text)
    write(HORIZONTAL_LINE)


def run_console_loop(state: AppState, *, read_line: ReadLine = input, write: Write = print) -> None:
    """
    Read one command per line until `bye` (or end of input).

    A failing command never stops the loop: BuddyError messages are shown
    as-is, anything unexpected is logged with its traceback and reported as
    an internal error.
    """
    app_name = state.settings.app_name
    logger.info("Console connector started (tasks=%d).", state.tasks.size())

    _print_block(
        write,
        f"Woof! I'm {app_name}, your loyal Task-Tracker.\n"
        "What shall I add to the List for you?\n"
        f"{command_registry.build_help()}\n"
        "  bye - Leave.",
    )

    while True:
        try:
            line = read_line("")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if not line.strip():
            continue

        if get_command_word(line) == "bye":
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
        except BuddyError as e:
            logger.info("Command rejected (%s): %s", e.code, e.message)
            _print_block(write, f" OOPS!!! {e.message}")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            _print_block(write, " OOPS!!! Internal error while handling that command.")
            continue

        _print_block(write, reply)

    _print_block(write, " Bye. Hope to see you again soon!")
    logger.info("Console connector finished.")
