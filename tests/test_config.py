# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings

_VARS = (
    "TASK_TRACKER_APP_NAME",
    "TASK_TRACKER_LOG_LEVEL",
    "TASK_TRACKER_LOG_TO_FILE",
    "TASK_TRACKER_DATA_DIR",
    "TASK_TRACKER_TASKS_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "task-tracker"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.tasks_file == Path("config") / "task_list.json"
    assert s.log_file == Path("config") / "task-tracker.log"


def test_tasks_file_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_LOG_TO_FILE", "yes")

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "task_list.json"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True


def test_explicit_tasks_file_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASK_TRACKER_TASKS_FILE", str(tmp_path / "mine.json"))

    assert Settings.from_env().tasks_file == tmp_path / "mine.json"
