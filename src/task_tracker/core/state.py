# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRenderer, TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read globals.
    settings: object

    task_store: TaskRepo
    renderer: TaskRenderer
