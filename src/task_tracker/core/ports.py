# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the command layer.

Handlers depend on these Protocols instead of concrete classes, so the
presentation and the store stay swappable and easy to fake in tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRenderer(Protocol):
    """Turns tasks into user-facing text."""

    def render(self, tasks: Sequence[Task]) -> str: ...
    def render_task(self, task: Task) -> str: ...


class TaskRepo(Protocol):
    def add(self, description: str) -> Task: ...
    def edit(self, task_id: int, description: str) -> Task: ...
    def delete(self, task_id: int) -> Task: ...
    def mark_status(self, task_id: int, status: TaskStatus) -> Task: ...
    def list_by_status(self, statuses: Iterable[TaskStatus]) -> list[Task]: ...
    def get_by_id(self, task_id: int) -> Task: ...
