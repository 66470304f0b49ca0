# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import (
    Add,
    Command,
    Complete,
    Invalid,
    ListTasks,
    Quit,
    Unknown,
    build_help,
    parse_command,
)
from ..core.state import AppState, LoopState
from ..tasks.task_models import CompleteOutcome, EmptyDescriptionError
from ..tasks.task_render import format_task_list

logger = logging.getLogger(__name__)

BANNER = "=== TODO APP (add/list/done/quit) ==="
FAREWELL = "Goodbye!"


class InputStreamError(RuntimeError):
    """Reading the input stream failed (distinct from reaching end of input)."""


class OutputStreamError(RuntimeError):
    """Writing to the output stream failed (e.g. the reader closed the pipe)."""


def handle_command(state: AppState, command: Command) -> tuple[str, LoopState]:
    """
    Apply one parsed command to the store.

    Returns the reply text and the loop state to continue in.
    """
    store = state.task_store

    if isinstance(command, Quit):
        logger.info("Console exit command received.")
        return FAREWELL, LoopState.TERMINATED

    if isinstance(command, Add):
        try:
            task_id = store.add_task(command.text)
        except EmptyDescriptionError:
            return "Please enter a task after 'add'", LoopState.RUNNING
        return f"Added task #{task_id}", LoopState.RUNNING

    if isinstance(command, ListTasks):
        return format_task_list(store.list_tasks()), LoopState.RUNNING

    if isinstance(command, Complete):
        outcome = store.complete_task(command.task_id)
        if outcome is CompleteOutcome.FOUND:
            return f"Marked task #{command.task_id} as done!", LoopState.RUNNING
        return f"Task #{command.task_id} not found.", LoopState.RUNNING

    if isinstance(command, Invalid):
        logger.debug("Invalid command argument: %s", command.reason)
        return "Invalid ID - use a number", LoopState.RUNNING

    if isinstance(command, Unknown):
        logger.debug("Unknown command line=%r", command.line)
        return f"Unknown command. Try: {build_help()}", LoopState.RUNNING

    raise TypeError(f"unsupported command: {command!r}")


def _is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _write(out: TextIO, text: str) -> None:
    try:
        out.write(text)
        out.flush()
    except (OSError, ValueError) as e:
        # BrokenPipeError is an OSError; writing to a closed stream is a ValueError.
        raise OutputStreamError(f"Error writing output: {e}") from e


def _emit(out: TextIO, text: str) -> None:
    _write(out, text + "\n")


def _read_line(stdin: TextIO) -> str:
    try:
        return stdin.readline()
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        return ""
    except (OSError, ValueError) as e:
        # UnicodeDecodeError is a ValueError; so is reading a closed stream.
        raise InputStreamError(f"Error reading input: {e}") from e


def run_console_loop(
    state: AppState,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    Read commands line by line until `quit` or end of input.

    Banner and prompt are only shown when stdin is a terminal, so piped
    sessions produce reply lines only.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    interactive = _is_interactive(stdin)
    prompt = str(getattr(state.settings, "prompt", "> "))

    logger.info("Console connector started (interactive=%s).", interactive)
    if interactive and getattr(state.settings, "show_banner", True):
        _emit(stdout, BANNER)

    while state.loop_state is LoopState.RUNNING:
        if interactive:
            _write(stdout, prompt)

        raw = _read_line(stdin)
        if raw == "":
            logger.info("Console EOF received, exiting.")
            if interactive:
                _write(stdout, "\n")
            _emit(stdout, FAREWELL)
            state.loop_state = LoopState.TERMINATED
            break

        command = parse_command(raw.rstrip("\r\n"))
        reply, state.loop_state = handle_command(state, command)
        _emit(stdout, reply)

    logger.info("Console connector finished (tasks=%s).", state.task_store.count_tasks())
