# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop in the
main thread until `quit` or end of input.

Exit codes:
- 0: normal termination (quit / end of input)
- 1: the input stream could not be read
- 2: the output stream could not be written (a closed pipe exits quietly)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import (
    InputStreamError,
    OutputStreamError,
    run_console_loop,
)
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_FAILURE = 1
EXIT_OUTPUT_FAILURE = 2


def run(
    *,
    settings=None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one console session and return the process exit code."""
    stderr = sys.stderr if stderr is None else stderr
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state, stdin=stdin, stdout=stdout)
    except InputStreamError as e:
        logger.debug("Console input failed.", exc_info=True)
        print(f"error: {e}", file=stderr)
        return EXIT_INPUT_FAILURE
    except OutputStreamError as e:
        logger.debug("Console output failed.", exc_info=True)
        if not isinstance(e.__cause__, BrokenPipeError):
            print(f"error: {e}", file=stderr)
        return EXIT_OUTPUT_FAILURE

    return EXIT_OK


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    code = run(settings=settings)
    if code == EXIT_OUTPUT_FAILURE:
        # Keep the interpreter from flushing into the dead pipe again at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    logger.info("Bye.")
    sys.exit(code)


if __name__ == "__main__":
    main()
