# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One run = parse the arguments, load the task file, execute one command,
save the task file. Any TaskTrackerError ends the run with exit code 1 and
the file is left as it was.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state, save_state
from ..cli.commands import execute, registry
from ..cli.parser import parse_command
from ..config import Settings, get_settings
from ..errors import InvalidCommand, MissingArgument, TaskTrackerError
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)

HELP_TOKENS = frozenset({"help", "-h", "--help"})


def run(args: Sequence[str], settings: Settings) -> None:
    command = parse_command(args)
    state = create_initial_state(settings=settings)
    execute(state, command)
    save_state(state)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if settings is None:
        settings = get_settings()

    setup_logging(
        console_level=level_from_name(settings.log_level),
        log_file=settings.log_file if settings.log_to_file else None,
    )
    logger.debug("Starting %s args=%r tasks_file=%s", settings.app_name, args, settings.tasks_file)

    if args and args[0] in HELP_TOKENS:
        print(registry.build_help(settings.app_name))
        return 0

    try:
        run(args, settings)
    except TaskTrackerError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        if _wants_usage(e):
            print(registry.build_help(settings.app_name), file=sys.stderr)
        return 1

    return 0


def _wants_usage(error: TaskTrackerError) -> bool:
    if isinstance(error, InvalidCommand):
        return True
    return isinstance(error, MissingArgument) and error.command is None


if __name__ == "__main__":
    sys.exit(main())
