# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER_PREFIX = "task_tracker"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable next to the command output:
    - allow task_tracker logs at the configured level
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress any third-party logger unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == APP_LOGGER_PREFIX or name.startswith(APP_LOGGER_PREFIX + "."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, filtered (stdout is reserved for command output)
    - File handler with full logs, only when log_file is given

    Call this ONCE, very early (before the first logger call).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default
