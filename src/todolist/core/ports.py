# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the dispatcher.

The console loop depends on Protocols instead of the concrete store,
which keeps the store swappable and makes testing easier.
"""

from collections.abc import Iterator
from typing import Protocol

from ..tasks.task_models import CompleteOutcome, Task


class TaskRepo(Protocol):
    def add_task(self, description: str) -> int: ...
    def list_tasks(self) -> Iterator[Task]: ...
    def complete_task(self, task_id: int) -> CompleteOutcome: ...
    def count_tasks(self) -> int: ...
