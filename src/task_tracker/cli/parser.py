# src/task_tracker/cli/parser.py

"""
Argument list -> typed command.

    add <description>
    edit <id> <description>
    delete <id>
    list [todo|progress|done|all]      (default: all)
    mark <id> <todo|progress|done>

`args` never includes the program name. Tokens are matched exactly
(case-sensitive); descriptions are taken verbatim.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import InvalidCommand, InvalidStatus, MalformedInteger, MissingArgument, StatusNotAllowed
from ..tasks.task_models import StatusFilter

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class AddCommand:
    description: str


@dataclass(frozen=True, slots=True)
class EditCommand:
    task_id: int
    description: str


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    task_id: int


@dataclass(frozen=True, slots=True)
class ListCommand:
    status: StatusFilter = StatusFilter.ALL


@dataclass(frozen=True, slots=True)
class MarkCommand:
    task_id: int
    status: StatusFilter


Command = AddCommand | EditCommand | DeleteCommand | ListCommand | MarkCommand

COMMAND_NAMES: tuple[str, ...] = ("add", "edit", "list", "delete", "mark")


def parse_status(token: str, *, allow_all: bool) -> StatusFilter:
    """Shared status parser; `all` is only valid where a filter is expected."""
    try:
        status = StatusFilter(token)
    except ValueError:
        raise InvalidStatus(token) from None
    if status is StatusFilter.ALL and not allow_all:
        raise StatusNotAllowed(token)
    return status


def parse_id(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise MalformedInteger(token)
    return int(token)


class _Args:
    """Positional cursor over the tokens that follow the command name."""

    def __init__(self, command: str, rest: Sequence[str]) -> None:
        self.command = command
        self._rest = list(rest)
        self._pos = 0

    def required(self, name: str) -> str:
        if self._pos >= len(self._rest):
            raise MissingArgument(name, self.command)
        value = self._rest[self._pos]
        self._pos += 1
        return value

    def optional(self, default: str) -> str:
        if self._pos >= len(self._rest):
            return default
        value = self._rest[self._pos]
        self._pos += 1
        return value

    def finish(self) -> None:
        extra = self._rest[self._pos:]
        if extra:
            logger.debug("Ignoring extra arguments for %s: %r", self.command, extra)


def parse_command(args: Sequence[str]) -> Command:
    if not args:
        raise MissingArgument("command")

    name = args[0]
    cur = _Args(name, args[1:])

    cmd: Command
    if name == "add":
        cmd = AddCommand(description=cur.required("description"))
    elif name == "edit":
        task_id = parse_id(cur.required("id"))
        cmd = EditCommand(task_id=task_id, description=cur.required("description"))
    elif name == "delete":
        cmd = DeleteCommand(task_id=parse_id(cur.required("id")))
    elif name == "list":
        cmd = ListCommand(status=parse_status(cur.optional(StatusFilter.ALL.value), allow_all=True))
    elif name == "mark":
        task_id = parse_id(cur.required("id"))
        cmd = MarkCommand(task_id=task_id, status=parse_status(cur.required("status"), allow_all=False))
    else:
        raise InvalidCommand(name)

    cur.finish()
    logger.debug("Parsed command: %r", cmd)
    return cmd
