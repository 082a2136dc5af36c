# src/buddy/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

if TYPE_CHECKING:
    from ..config import Settings


@dataclass
class AppState:
    # Settings are kept on the state so handlers and connectors can read them.
    settings: Settings

    tasks: TaskList
    store: TaskStore
