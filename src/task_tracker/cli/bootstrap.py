# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings once,
- loads the task store from the configured file,
- wires store + renderer into AppState,
- writes the store back after the command ran.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_render import TableRenderer
from ..tasks.task_store import Clock, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings: Settings | None = None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden
    global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore.load(settings.tasks_file, clock=clock)
    return AppState(
        settings=settings,
        task_store=store,
        renderer=TableRenderer(),
    )


def save_state(state: AppState) -> None:
    path = state.settings.tasks_file  # type: ignore[attr-defined]
    store = state.task_store
    if not isinstance(store, TaskStore):
        raise TypeError(f"Cannot persist {type(store).__name__}")
    store.save(path)
    logger.info("Saved %d tasks to %s", len(store), path)
