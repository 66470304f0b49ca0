# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from .task_models import CompleteOutcome, EmptyDescriptionError, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    Invariants:
    - ids are assigned from a private counter starting at 1, never reused
    - records keep insertion order; nothing is ever removed or reordered
    - stored descriptions are stripped and never empty

    Task records are frozen; complete_task() swaps in an updated copy,
    so callers holding a Task never observe it changing underneath them.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.debug("TaskStore ready")

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, description: str) -> int:
        text = (description or "").strip()
        if not text:
            raise EmptyDescriptionError("description is required")

        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=text))
        self._next_id += 1
        logger.debug("Task added id=%s total=%s", task_id, len(self._tasks))
        return task_id

    def list_tasks(self) -> Iterator[Task]:
        """
        Iterate over all tasks in insertion order (completed ones included).

        Each call returns a fresh iterator, so listing can be restarted at will.
        """
        yield from self._tasks

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete_task(self, task_id: int) -> CompleteOutcome:
        """
        Mark the task with the given id as completed.

        Completing an already-completed task is a no-op that still reports FOUND.
        """
        for idx, task in enumerate(self._tasks):
            if task.id != task_id:
                continue
            if not task.completed:
                self._tasks[idx] = replace(task, completed=True)
                logger.debug("Task completed id=%s", task_id)
            return CompleteOutcome.FOUND

        logger.debug("complete_task: no task id=%s", task_id)
        return CompleteOutcome.NOT_FOUND
