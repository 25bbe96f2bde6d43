# src/task_tracker/tasks/task_render.py

"""Plain-text presentation of tasks: listing table and confirmation lines."""

from __future__ import annotations

import shutil
import textwrap
from collections.abc import Sequence
from datetime import datetime

from .task_models import Task, TaskStatus

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HEADERS = ("ID", "Status", "Description", "Created", "Updated")
SEP = " | "
MIN_DESC_WIDTH = 16
DEFAULT_TERMINAL_SIZE = (100, 24)


def status_label(status: TaskStatus) -> str:
    return status.label


def format_date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


class TableRenderer:
    """
    Renders tasks as a fixed-width table.

    Descriptions wrap inside their column; every other column is sized to its
    widest cell. `width` pins the total line width (terminal width otherwise).
    """

    def __init__(self, width: int | None = None) -> None:
        self._width = width

    def _total_width(self) -> int:
        if self._width is not None:
            return self._width
        return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).columns

    def render(self, tasks: Sequence[Task]) -> str:
        rows = [
            (
                str(t.id),
                status_label(t.status),
                t.description,
                format_date(t.created_at),
                format_date(t.updated_at),
            )
            for t in tasks
        ]

        widths = [len(h) for h in HEADERS]
        for row in rows:
            for i, cell in enumerate(row):
                if i != 2:
                    widths[i] = max(widths[i], len(cell))

        longest_desc = max([len(HEADERS[2]), *(len(r[2]) for r in rows)])
        fixed = sum(w for i, w in enumerate(widths) if i != 2) + len(SEP) * (len(HEADERS) - 1)
        widths[2] = min(longest_desc, max(MIN_DESC_WIDTH, self._total_width() - fixed))

        lines = [
            self._line(HEADERS, widths),
            SEP.join("-" * w for w in widths),
        ]
        for row in rows:
            wrapped = textwrap.wrap(row[2], widths[2]) or [""]
            lines.append(self._line((row[0], row[1], wrapped[0], row[3], row[4]), widths))
            for extra in wrapped[1:]:
                lines.append(self._line(("", "", extra, "", ""), widths))
        return "\n".join(lines)

    @staticmethod
    def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
        return SEP.join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    def render_task(self, task: Task) -> str:
        return (
            f"#{task.id} [{status_label(task.status)}] {task.description}\n"
            f"  created: {format_date(task.created_at)}  updated: {format_date(task.updated_at)}"
        )
