# tests/test_console_connector.py

from __future__ import annotations

import io

import pytest

from todolist.cli.commands import Add, Complete, Invalid, ListTasks, Quit, Unknown
from todolist.connectors.console_connector import (
    BANNER,
    FAREWELL,
    InputStreamError,
    OutputStreamError,
    handle_command,
    run_console_loop,
)
from todolist.core.state import AppState, LoopState

from .fakes import BrokenInput, BrokenOutput, InterruptedInput, TtyStringIO


def _session(state: AppState, lines: list[str]) -> list[str]:
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    run_console_loop(state, stdin=stdin, stdout=stdout)
    return stdout.getvalue().splitlines()


# ---- handle_command ----


def test_handle_add_reports_assigned_id(state: AppState) -> None:
    assert handle_command(state, Add(text="buy milk")) == ("Added task #1", LoopState.RUNNING)
    assert handle_command(state, Add(text="walk dog")) == ("Added task #2", LoopState.RUNNING)


def test_handle_add_empty_asks_for_text(state: AppState) -> None:
    reply, nxt = handle_command(state, Add(text=""))
    assert reply == "Please enter a task after 'add'"
    assert nxt is LoopState.RUNNING
    assert state.task_store.count_tasks() == 0


def test_handle_list_empty(state: AppState) -> None:
    assert handle_command(state, ListTasks()) == ("No tasks yet!", LoopState.RUNNING)


def test_handle_complete_found_and_not_found(state: AppState) -> None:
    state.task_store.add_task("a")
    assert handle_command(state, Complete(task_id=1)) == ("Marked task #1 as done!", LoopState.RUNNING)
    assert handle_command(state, Complete(task_id=7)) == ("Task #7 not found.", LoopState.RUNNING)


def test_handle_invalid_and_unknown(state: AppState) -> None:
    reply, nxt = handle_command(state, Invalid(reason="not a number"))
    assert reply == "Invalid ID - use a number"
    assert nxt is LoopState.RUNNING

    reply, nxt = handle_command(state, Unknown(line="dance"))
    assert reply == "Unknown command. Try: add [task] / list / done [id] / quit"
    assert nxt is LoopState.RUNNING


def test_handle_quit_terminates(state: AppState) -> None:
    assert handle_command(state, Quit()) == (FAREWELL, LoopState.TERMINATED)


def test_handle_rejects_foreign_objects(state: AppState) -> None:
    with pytest.raises(TypeError):
        handle_command(state, "list")  # type: ignore[arg-type]


# ---- run_console_loop scenarios ----


def test_scenario_add_two_then_list(state: AppState) -> None:
    out = _session(state, ["add buy milk", "add walk dog", "list"])
    assert out == [
        "Added task #1",
        "Added task #2",
        "1 [ ] buy milk",
        "2 [ ] walk dog",
        FAREWELL,
    ]


def test_scenario_complete_then_list(state: AppState) -> None:
    out = _session(state, ["add buy milk", "done 1", "list"])
    assert out == ["Added task #1", "Marked task #1 as done!", "1 [x] buy milk", FAREWELL]


def test_scenario_done_unknown_id_on_empty_store(state: AppState) -> None:
    out = _session(state, ["done 99"])
    assert out[0] == "Task #99 not found."
    assert "99" in out[0]


def test_scenario_add_without_text(state: AppState) -> None:
    out = _session(state, ["add "])
    assert out[0] == "Please enter a task after 'add'"
    assert state.task_store.count_tasks() == 0


def test_scenario_quit(state: AppState) -> None:
    out = _session(state, ["quit"])
    assert out == [FAREWELL]
    assert state.loop_state is LoopState.TERMINATED


def test_quit_stops_reading_further_lines(state: AppState) -> None:
    out = _session(state, ["add a", "quit", "add b"])
    assert out == ["Added task #1", FAREWELL]
    assert state.task_store.count_tasks() == 1


def test_end_of_input_says_goodbye(state: AppState) -> None:
    out = _session(state, [])
    assert out == [FAREWELL]
    assert state.loop_state is LoopState.TERMINATED


def test_errors_keep_the_loop_running(state: AppState) -> None:
    out = _session(state, ["bogus", "done x", "done 5", "add", "add ok", "list"])
    assert out == [
        "Unknown command. Try: add [task] / list / done [id] / quit",
        "Invalid ID - use a number",
        "Task #5 not found.",
        "Please enter a task after 'add'",
        "Added task #1",
        "1 [ ] ok",
        FAREWELL,
    ]


def test_crlf_line_endings(state: AppState) -> None:
    stdin = io.StringIO("add a\r\nlist\r\n", newline="")
    stdout = io.StringIO()
    run_console_loop(state, stdin=stdin, stdout=stdout)
    assert stdout.getvalue().splitlines() == ["Added task #1", "1 [ ] a", FAREWELL]


def test_last_line_without_newline_is_processed(state: AppState) -> None:
    stdin = io.StringIO("add a\nlist")
    stdout = io.StringIO()
    run_console_loop(state, stdin=stdin, stdout=stdout)
    assert stdout.getvalue().splitlines() == ["Added task #1", "1 [ ] a", FAREWELL]


def test_piped_input_has_no_prompt_or_banner(state: AppState) -> None:
    out = _session(state, ["list"])
    assert BANNER not in out
    assert not any(line.startswith(">") for line in out)


def test_interactive_session_shows_banner_and_prompt(state: AppState) -> None:
    stdin = TtyStringIO("list\nquit\n")
    stdout = io.StringIO()
    run_console_loop(state, stdin=stdin, stdout=stdout)

    text = stdout.getvalue()
    assert text.startswith(BANNER + "\n")
    assert text.count("> ") == 2
    assert text.rstrip().endswith(FAREWELL)


def test_interactive_banner_can_be_disabled(state: AppState) -> None:
    state.settings.show_banner = False
    stdout = io.StringIO()
    run_console_loop(state, stdin=TtyStringIO("quit\n"), stdout=stdout)
    assert BANNER not in stdout.getvalue()


def test_keyboard_interrupt_is_treated_as_end_of_input(state: AppState) -> None:
    stdout = io.StringIO()
    run_console_loop(state, stdin=InterruptedInput(), stdout=stdout)
    assert stdout.getvalue().splitlines() == [FAREWELL]
    assert state.loop_state is LoopState.TERMINATED


def test_read_failure_raises_input_stream_error(state: AppState) -> None:
    stdout = io.StringIO()
    with pytest.raises(InputStreamError):
        run_console_loop(state, stdin=BrokenInput("add a\n"), stdout=stdout)

    assert stdout.getvalue().splitlines() == ["Added task #1"]


def test_decode_failure_raises_input_stream_error(state: AppState) -> None:
    err = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    with pytest.raises(InputStreamError):
        run_console_loop(state, stdin=BrokenInput(error=err), stdout=io.StringIO())


def test_huge_id_keeps_the_loop_running(state: AppState) -> None:
    out = _session(state, ["done " + "9" * 5000, "add a"])
    assert out == ["Invalid ID - use a number", "Added task #1", FAREWELL]


def test_write_failure_raises_output_stream_error(state: AppState) -> None:
    with pytest.raises(OutputStreamError) as exc:
        run_console_loop(state, stdin=io.StringIO("list\n"), stdout=BrokenOutput())
    assert isinstance(exc.value.__cause__, BrokenPipeError)
