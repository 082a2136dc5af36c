# src/buddy/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings, opens the task
file and wires the loaded tasks into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). An unreadable task file
    does not stop startup: the session begins with an empty list.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file_path)
    try:
        tasks = TaskList(store.load_tasks())
    except StorageError as e:
        logger.warning("I couldn't load your old list, starting fresh: %s", e)
        tasks = TaskList()

    return AppState(settings=settings, tasks=tasks, store=store)
