# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and prints
its result. Every failure ends up as printed text; the exit status is
always the process default.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import Settings, get_settings
from ..errors import TaskTrackerError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.debug("%s invoked with argv=%r", settings.app_name, argv)

    state = create_initial_state(settings=settings)

    try:
        reply = command_registry.handle(state, argv)
    except TaskTrackerError as e:
        # Full traceback goes to the log file only; the user gets one line.
        logger.debug("Command failed: %s", argv[0] if argv else "", exc_info=True)
        print(f"Error: {e.message}")
        return

    if reply:
        print(reply)


if __name__ == "__main__":
    main()
