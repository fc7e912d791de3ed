# src/astro_schedule/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (one ScheduleManager for the process),
then runs the console REPL in the main thread until exit/EOF.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_file=settings.log_file, file_level=file_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        shutdown_state(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
