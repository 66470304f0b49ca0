# src/todolist/tasks/task_render.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task

EMPTY_LIST_TEXT = "No tasks yet!"


def format_task(task: Task) -> str:
    mark = "[x]" if task.completed else "[ ]"
    return f"{task.id} {mark} {task.description}"


def format_task_list(tasks: Iterable[Task]) -> str:
    """One line per task, or EMPTY_LIST_TEXT when there is nothing to show."""
    lines = [format_task(t) for t in tasks]
    if not lines:
        return EMPTY_LIST_TEXT
    return "\n".join(lines)
