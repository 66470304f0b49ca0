# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires the concrete task store
into AppState. The store is created here once and handed to the console
loop; nothing else keeps a reference to it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, task_store=TaskStore())
    logger.debug("Initial state created app=%s", getattr(settings, "app_name", "todolist"))
    return state
