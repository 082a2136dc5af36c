# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from buddy.errors import TaskIndexError
from buddy.tasks.task_list import TaskList
from buddy.tasks.task_models import Deadline, Event, Todo


def _sample() -> TaskList:
    return TaskList(
        [
            Todo("Read BOOK"),
            Deadline("return book", date(2024, 3, 15)),
            Event("meeting", "Mon 2pm", "Mon 4pm"),
        ]
    )


def test_add_appends_in_order() -> None:
    tasks = TaskList()
    assert tasks.size() == 0
    tasks.add(Todo("a"))
    tasks.add(Todo("b"))
    assert [t.description for t in tasks] == ["a", "b"]
    assert len(tasks) == 2


def test_mark_unmark_return_task_and_are_idempotent() -> None:
    tasks = _sample()
    first = tasks.mark(0)
    assert first is tasks.get(0)
    tasks.mark(0)
    assert tasks.get(0).is_done

    tasks.unmark(0)
    tasks.unmark(0)
    assert not tasks.get(0).is_done


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range_reports_one_based_number(index: int) -> None:
    tasks = _sample()
    with pytest.raises(TaskIndexError) as exc:
        tasks.mark(index)
    assert f"Task {index + 1} " in exc.value.message
    assert not any(t.is_done for t in tasks)


def test_remove_shifts_following_tasks() -> None:
    tasks = _sample()
    removed = tasks.remove(0)
    assert removed.description == "Read BOOK"
    assert tasks.size() == 2
    assert tasks.get(0).description == "return book"

    with pytest.raises(TaskIndexError):
        tasks.remove(2)
    assert tasks.size() == 2


def test_find_is_case_insensitive_and_ordered() -> None:
    tasks = _sample()
    matches = tasks.find("bOoK")
    assert [t.description for t in matches] == ["Read BOOK", "return book"]
    assert tasks.find("holiday") == []


def test_all_tasks_is_a_copy() -> None:
    tasks = _sample()
    snapshot = tasks.all_tasks()
    snapshot.clear()
    assert tasks.size() == 3
