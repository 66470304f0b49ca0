# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .ports import TaskRepo


class LoopState(StrEnum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class AppState:
    # Settings object (config.Settings or a test double).
    settings: object

    # Owned exclusively by the console loop for the lifetime of the process.
    task_store: TaskRepo

    loop_state: LoopState = LoopState.RUNNING
