# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from buddy.tasks.task_models import Deadline, Event, TaskType, Todo, parse_iso_date


def test_render_variants() -> None:
    assert str(Todo("read book")) == "[T][ ] read book"
    assert str(Deadline("return book", date(2024, 3, 15))) == "[D][ ] return book (by: Mar 15 2024)"
    assert str(Event("meeting", "Mon 2pm", "Mon 4pm")) == "[E][ ] meeting (from: Mon 2pm to: Mon 4pm)"


def test_mark_and_unmark_are_idempotent() -> None:
    task = Todo("x")
    task.mark_done()
    task.mark_done()
    assert task.is_done
    assert str(task) == "[T][X] x"

    task.mark_undone()
    task.mark_undone()
    assert not task.is_done


@pytest.mark.parametrize("description", ["", "   ", "\t"])
def test_blank_description_rejected(description: str) -> None:
    with pytest.raises(ValueError):
        Todo(description)
    with pytest.raises(ValueError):
        Deadline(description, date(2024, 1, 1))


def test_event_requires_start_and_end() -> None:
    with pytest.raises(ValueError):
        Event("party", "", "late")
    with pytest.raises(ValueError):
        Event("party", "early", " ")


def test_deadline_requires_a_date() -> None:
    with pytest.raises(TypeError):
        Deadline("report", "2024-03-15")  # type: ignore[arg-type]


def test_is_done_is_keyword_only_and_defaults_false() -> None:
    task = Deadline("report", date(2024, 3, 15), is_done=True)
    assert task.is_done
    assert not Todo("y").is_done


@pytest.mark.parametrize("raw", ["2024-3-15", "20240315", "2024-W11-5", "15-03-2024", "2024-02-30", ""])
def test_parse_iso_date_is_strict(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_iso_date(raw)


def test_parse_iso_date_trims() -> None:
    assert parse_iso_date(" 2024-03-15 ") == date(2024, 3, 15)


def test_task_type_from_code() -> None:
    assert TaskType.from_code("D") is TaskType.DEADLINE
    assert TaskType.from_code("X") is None
    assert TaskType.from_code("") is None


def test_description_cannot_be_reassigned() -> None:
    task = Deadline("report", date(2024, 3, 15))
    with pytest.raises(AttributeError):
        task.description = ""
    assert task.description == "report"

    task.is_done = True
    assert task.is_done
