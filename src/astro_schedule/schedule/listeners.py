# src/astro_schedule/schedule/listeners.py

from __future__ import annotations

import logging
from collections.abc import Callable

from .models import Task
from .observers import TaskObserver

logger = logging.getLogger(__name__)


class LoggingTaskObserver(TaskObserver):
    """Log sink: records every schedule mutation (conflicts at WARNING)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        super().__init__()
        self._log = log or logger

    def on_task_added(self, task: Task) -> None:
        self._log.info("Task added: %s", task.description)

    def on_task_removed(self, task: Task) -> None:
        self._log.info("Task removed: %s", task.description)

    def on_task_conflict(self, task: Task, existing: Task | None) -> None:
        self._log.warning(
            "Add Task failed due to conflict: %s conflicts with %s",
            task.description,
            existing.description if existing is not None else "?",
        )

    def on_task_updated(self, task: Task) -> None:
        self._log.info("Task updated: %s (%s)", task.description, task)


class ConsoleTaskObserver(TaskObserver):
    """Prints user-facing "Notification: ..." lines (console front end)."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        super().__init__()
        self._write = write

    def on_task_added(self, task: Task) -> None:
        self._write(f'Notification: Task "{task.description}" added.')

    def on_task_removed(self, task: Task) -> None:
        self._write(f'Notification: Task "{task.description}" removed.')

    def on_task_conflict(self, task: Task, existing: Task | None) -> None:
        other = existing.description if existing is not None else "?"
        self._write(
            f'Notification: Conflict detected! "{task.description}" '
            f'conflicts with existing task "{other}".'
        )

    def on_task_updated(self, task: Task) -> None:
        self._write(f'Notification: Task "{task.description}" updated.')
