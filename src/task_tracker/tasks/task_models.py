# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..errors import StatusNotAllowed


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The values are the names written to the task file ("Todo", "Progress",
    "Done"), so they must stay stable.
    """

    TODO = "Todo"
    PROGRESS = "Progress"
    DONE = "Done"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To do",
    TaskStatus.PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

ALL_STATUSES: frozenset[TaskStatus] = frozenset(TaskStatus)


class StatusFilter(StrEnum):
    """
    Status as typed on the command line.

    Same set as TaskStatus plus the aggregate ALL. `list` takes a filter;
    `mark` needs a concrete value and narrows with to_status().
    """

    TODO = "todo"
    PROGRESS = "progress"
    DONE = "done"
    ALL = "all"

    def to_status(self) -> TaskStatus:
        if self is StatusFilter.ALL:
            raise StatusNotAllowed(self.value)
        return _FILTER_TO_STATUS[self]

    def expand(self) -> frozenset[TaskStatus]:
        if self is StatusFilter.ALL:
            return ALL_STATUSES
        return frozenset({_FILTER_TO_STATUS[self]})


_FILTER_TO_STATUS: dict[StatusFilter, TaskStatus] = {
    StatusFilter.TODO: TaskStatus.TODO,
    StatusFilter.PROGRESS: TaskStatus.PROGRESS,
    StatusFilter.DONE: TaskStatus.DONE,
}


@dataclass(slots=True)
class Task:
    id: int
    status: TaskStatus
    description: str
    created_at: datetime
    updated_at: datetime
