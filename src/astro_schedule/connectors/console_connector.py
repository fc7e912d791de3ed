# src/astro_schedule/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry | None = None,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    reg = registry or command_registry
    app_name = str(getattr(state.settings, "app_name", "astro-schedule"))

    logger.info("Console connector started.")
    write(f"Welcome to {app_name}: daily schedule organizer")
    write(reg.build_help())

    while True:
        try:
            user_input = read_line("\nEnter command: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            write("Please enter a command.")
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            write("Exiting. Goodbye!")
            break

        try:
            reply = reg.handle(state, user_input)
        except Exception as e:
            logger.exception("Command handler crashed.")
            reply = f"Unexpected error: {e}"

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
