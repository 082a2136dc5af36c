# tests/test_console_connector.py

from __future__ import annotations

from buddy.connectors.console_connector import run_console_loop
from buddy.core.state import AppState

from .fakes import ScriptedInput


def _run(state: AppState, lines: list[str]) -> tuple[list[str], ScriptedInput]:
    out: list[str] = []
    reader = ScriptedInput(lines)
    run_console_loop(state, read_line=reader, write=out.append)
    return out, reader


def test_loop_stops_on_bye_case_insensitive(state: AppState) -> None:
    out, reader = _run(state, ["todo first", "ByE", "todo never"])
    assert state.tasks.size() == 1
    assert reader.prompts == 2
    assert any("Bye. Hope to see you again soon!" in o for o in out)


def test_errors_do_not_stop_the_loop(state: AppState) -> None:
    out, _ = _run(state, ["nonsense", "mark x", "mark 9", "todo after errors", "bye"])
    oops = [o for o in out if "OOPS!!!" in o]
    assert len(oops) == 3
    assert state.tasks.size() == 1
    assert state.store.load_tasks()[0].description == "after errors"


def test_blank_lines_are_skipped_and_eof_exits(state: AppState) -> None:
    out, _ = _run(state, ["", "   ", "list"])
    assert not any("OOPS" in o for o in out)
    assert any("empty" in o for o in out)
    assert out[-2] == " Bye. Hope to see you again soon!"


def test_unexpected_exception_is_reported(state: AppState, monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(state.tasks, "find", boom)
    out, _ = _run(state, ["find x", "todo still alive", "bye"])
    assert any("Internal error" in o for o in out)
    assert state.tasks.size() == 1


def test_scenario_from_empty_file(state: AppState) -> None:
    out, _ = _run(
        state,
        [
            "deadline return book /by 2024-03-15",
            "list",
            "event meeting /from Mon 2pm /to Mon 4pm",
            "delete 2",
            "mark 1",
            "find BOOK",
            "bye",
        ],
    )
    assert "1. [D][X] return book (by: Mar 15 2024)" in out[-5]
    assert state.store.file_path.read_text(encoding="utf-8") == "D | 1 | return book | 2024-03-15\n"


def test_greeting_uses_configured_app_name(state: AppState) -> None:
    state.settings.app_name = "Rex"
    out, _ = _run(state, ["bye"])
    assert out[1].startswith("Woof! I'm Rex, your loyal Task-Tracker.")
