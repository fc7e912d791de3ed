# src/astro_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the single ScheduleManager and wires its listeners into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskListener
from ..core.state import AppState
from ..schedule.listeners import ConsoleTaskObserver, LoggingTaskObserver
from ..schedule.manager import ScheduleManager
from ..schedule.observers import ObserverRegistry

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    manager = ScheduleManager(
        observers=ObserverRegistry(isolate_errors=settings.isolate_listener_errors),
    )

    listeners: list[TaskListener] = [LoggingTaskObserver()]
    if settings.console_notifications:
        listeners.append(ConsoleTaskObserver())

    for listener in listeners:
        manager.register_listener(listener)

    logger.info(
        "Schedule ready (listeners=%d, isolate_listener_errors=%s)",
        len(listeners),
        settings.isolate_listener_errors,
    )
    return AppState(settings=settings, scheduler=manager, listeners=listeners)


def shutdown_state(state: AppState) -> None:
    for listener in state.listeners:
        state.scheduler.unregister_listener(listener)
    state.listeners.clear()
