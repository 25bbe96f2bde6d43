# src/task_tracker/errors.py

"""
Error hierarchy.

Every failure a single invocation can hit is a TaskTrackerError subclass.
The entry point catches the base class, prints the message and exits 1.
"""

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for all errors reported to the user."""


# ---- command line ----


class CommandError(TaskTrackerError):
    """The argument list could not be turned into a command."""


class InvalidCommand(CommandError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Got incorrect command: {name}")
        self.name = name


class MissingArgument(CommandError):
    def __init__(self, argument: str, command: str | None = None) -> None:
        if command:
            msg = f"Missing argument <{argument}> for '{command}'"
        else:
            msg = f"Missing argument <{argument}>"
        super().__init__(msg)
        self.argument = argument
        self.command = command


class MalformedInteger(CommandError):
    def __init__(self, raw: str, argument: str = "id") -> None:
        super().__init__(f"Expected an integer for <{argument}>, got {raw!r}")
        self.raw = raw
        self.argument = argument


class InvalidStatus(CommandError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Failed to parse status {raw!r}")
        self.raw = raw


class StatusNotAllowed(CommandError):
    def __init__(self, raw: str = "all") -> None:
        super().__init__(f"Status not allowed here: {raw!r} (use todo, progress or done)")
        self.raw = raw


# ---- store ----


class TaskNotFound(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


# ---- persistence ----


class StorageError(TaskTrackerError):
    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class FileIOError(StorageError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Failed to access '{path}': {reason}", path)
        self.reason = reason


class JsonParseError(StorageError):
    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(f"Failed to parse JSON in '{path}': {detail}", path)
        self.detail = detail
