# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, RecordingRenderer


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test data dir; the real env is never read."""
    data_dir = tmp_path / "data"
    return Settings(
        app_name="task-tracker",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_file=data_dir / "task_list.json",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def state(settings: Settings, store: TaskStore, renderer: RecordingRenderer) -> AppState:
    return AppState(settings=settings, task_store=store, renderer=renderer)
