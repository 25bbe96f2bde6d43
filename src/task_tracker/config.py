# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The task file path is a plain value handed to the store, never a global
  the store reads on its own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"

DEFAULT_DATA_DIR = Path("config")
DEFAULT_TASKS_FILENAME = "task_list.json"
LOG_FILENAME = "task-tracker.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_file: Path

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILENAME

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        tasks_file = _env_path(_k("TASKS_FILE"), data_dir / DEFAULT_TASKS_FILENAME)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_file=tasks_file,
        )


_SETTINGS: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """
    Return the process-wide settings.

    The local .env is read on first use (existing environment wins), so
    importing this module has no side effects.
    """
    global _SETTINGS
    if _SETTINGS is None or reload:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
