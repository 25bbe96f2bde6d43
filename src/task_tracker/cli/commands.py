# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.state import AppState
from .parser import AddCommand, Command, DeleteCommand, EditCommand, ListCommand, MarkCommand

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, Any, CommandEmitter], None]

NO_TASKS_MESSAGE = "No tasks found."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Routes a parsed command to its handler, keyed by command type."""

    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        command_type: type,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        self._handlers[command_type] = handler
        self._help[usage] = help_text

    def execute(self, state: AppState, command: Command, emit: CommandEmitter | None = None) -> None:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")

        logger.debug("Executing %r", command)
        handler(state, command, emit or print)

    def build_help(self, prog: str = "task-tracker") -> str:
        lines = [f"Usage: {prog} <command> [args...]", "", "Commands:"]
        width = max((len(u) for u in self._help), default=0)
        for usage, help_text in self._help.items():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, command: AddCommand, emit: CommandEmitter) -> None:
    task = state.task_store.add(command.description)
    emit("Added task:\n" + state.renderer.render_task(task))


def cmd_edit(state: AppState, command: EditCommand, emit: CommandEmitter) -> None:
    task = state.task_store.edit(command.task_id, command.description)
    emit("Updated task:\n" + state.renderer.render_task(task))


def cmd_delete(state: AppState, command: DeleteCommand, emit: CommandEmitter) -> None:
    task = state.task_store.delete(command.task_id)
    emit("Removed task:\n" + state.renderer.render_task(task))


def cmd_mark(state: AppState, command: MarkCommand, emit: CommandEmitter) -> None:
    # The parser already rejects `all` here; narrowing again keeps
    # hand-built commands honest.
    status = command.status.to_status()
    task = state.task_store.mark_status(command.task_id, status)
    emit(f"Task {task.id} updated to: {task.status.label}")


def cmd_list(state: AppState, command: ListCommand, emit: CommandEmitter) -> None:
    tasks = state.task_store.list_by_status(command.status.expand())
    if not tasks:
        emit(NO_TASKS_MESSAGE)
        return
    emit(state.renderer.render(tasks))


registry.register(AddCommand, cmd_add, "add <description>", "Add a new task.")
registry.register(EditCommand, cmd_edit, "edit <id> <description>", "Replace a task's description.")
registry.register(DeleteCommand, cmd_delete, "delete <id>", "Delete a task.")
registry.register(
    ListCommand,
    cmd_list,
    "list [todo|progress|done|all]",
    "List tasks, optionally filtered by status (default: all).",
)
registry.register(MarkCommand, cmd_mark, "mark <id> <todo|progress|done>", "Set a task's status.")


def execute(state: AppState, command: Command, emit: CommandEmitter | None = None) -> None:
    registry.execute(state, command, emit)
