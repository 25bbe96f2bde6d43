# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime
from pathlib import Path

from ..errors import FileIOError, JsonParseError, TaskNotFound
from .task_codec import EMPTY_DOCUMENT, decode_document, encode_document
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local time with a fixed UTC offset attached."""
    return datetime.now().astimezone()


class TaskStore:
    """
    In-memory task list backed by a single JSON file.

    The whole file is read by load() and rewritten by save(); nothing is
    written in between. There is no file locking: two invocations running
    against the same file race and the last save() wins.

    Ids are assigned as (highest id ever handed out) + 1. The high-water mark
    is persisted as "last_id" so a deleted id is not reused by a later run.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        last_id: int = 0,
        clock: Clock | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks)
        self._clock: Clock = clock or local_now
        self._last_id = max([last_id, *(t.id for t in self._tasks)])

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path, *, clock: Clock | None = None) -> TaskStore:
        """
        Read the task file at `path`.

        A missing file is created with an empty list first, so the first run
        in a fresh directory works.
        """
        path = Path(path)
        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(EMPTY_DOCUMENT, "utf-8")
                logger.info("Created empty task file %s", path)
            text = path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise JsonParseError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise FileIOError(path, e.strerror or str(e)) from e

        try:
            tasks, last_id = decode_document(text)
        except ValueError as e:
            raise JsonParseError(path, str(e)) from e

        store = cls(tasks, last_id=last_id, clock=clock)
        logger.debug("Loaded %d tasks from %s (last_id=%s)", len(store), path, store.last_id)
        return store

    def save(self, path: str | Path) -> None:
        path = Path(path)
        payload = encode_document(self._tasks, self._last_id)
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise FileIOError(path, e.strerror or str(e)) from e
        logger.debug("Saved %d tasks to %s", len(self._tasks), path)

    # ---- read API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def last_id(self) -> int:
        return self._last_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise TaskNotFound(task_id)

    def get_by_id(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def get_by_statuses(self, statuses: Iterable[TaskStatus]) -> list[Task]:
        wanted = set(statuses)
        return [t for t in self._tasks if t.status in wanted]

    def list_by_status(self, statuses: Iterable[TaskStatus]) -> list[Task]:
        """
        Tasks whose status is in `statuses`, in store order.

        Passing every status lists everything; an empty set lists nothing.
        """
        return self.get_by_statuses(statuses)

    # ---- mutations ----

    def _touch(self, task: Task) -> None:
        # A clock that steps backwards must not put updated_at before created_at.
        task.updated_at = max(self._clock(), task.created_at)

    def add(self, description: str) -> Task:
        task_id = self._last_id + 1
        now = self._clock()
        task = Task(
            id=task_id,
            status=TaskStatus.TODO,
            description=description,
            created_at=now,
            updated_at=now,
        )
        self._tasks.append(task)
        self._last_id = task_id
        logger.debug("Task added id=%s", task_id)
        return task

    def edit(self, task_id: int, description: str) -> Task:
        task = self.get_by_id(task_id)
        task.description = description
        self._touch(task)
        logger.debug("Task edited id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        removed = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task deleted id=%s", task_id)
        return removed

    def mark_status(self, task_id: int, status: TaskStatus) -> Task:
        task = self.get_by_id(task_id)
        task.status = status
        self._touch(task)
        logger.debug("Task marked id=%s status=%s", task_id, status.value)
        return task
