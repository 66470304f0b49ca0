# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CompleteOutcome(StrEnum):
    """Result of TaskStore.complete_task()."""

    FOUND = "found"
    NOT_FOUND = "not_found"


class EmptyDescriptionError(ValueError):
    """Raised by TaskStore.add_task() when the description is blank."""


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
