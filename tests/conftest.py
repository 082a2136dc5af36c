# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from buddy.core.state import AppState
from buddy.tasks.task_list import TaskList
from buddy.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than the real config keeps tests isolated from
    the developer's environment and .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Buddy",
        log_level="WARNING",
        file_logging=False,
        data_dir=data_dir,
        tasks_file_path=data_dir / "buddy.txt",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_file_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with an empty list and a real flat-file store under tmp_path."""
    return AppState(settings=settings, tasks=TaskList(), store=store)
