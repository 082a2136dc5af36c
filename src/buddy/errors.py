# src/buddy/errors.py

"""
Error taxonomy for Buddy.

Every error is recoverable: the console loop catches BuddyError, shows the
message and keeps reading commands. Each error carries a short machine code
next to the human-readable message (the message always names the expected
format, so it can be shown to the user as-is).
"""

from __future__ import annotations


class BuddyError(Exception):
    """Base exception for all user-facing Buddy failures."""

    code = "buddy_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class UnknownCommandError(BuddyError):
    code = "unknown_command"


class MissingArgumentError(BuddyError):
    """A required description, date, keyword or task number was not given."""

    code = "missing_argument"


class InvalidIndexError(BuddyError):
    """Task number is present but is not a base-10 integer."""

    code = "invalid_index"


class InvalidDateError(BuddyError):
    code = "invalid_date"


class TaskIndexError(BuddyError):
    """Task number does not point at an existing task."""

    code = "index_out_of_range"

    def __init__(self, index: int, size: int, action: str) -> None:
        super().__init__(
            f"I can't {action} that... Task {index + 1} doesn't exist! "
            f"You have {size} task(s) in your list."
        )
        self.index = index
        self.size = size
        self.action = action


class StorageError(BuddyError):
    """Reading or writing the task file failed."""

    code = "storage"
