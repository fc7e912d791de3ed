# src/astro_schedule/schedule/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from .errors import DuplicateTaskError, TaskNotFoundError
from .models import Task

logger = logging.getLogger(__name__)


def _start_key(task: Task):
    return task.start_time


class TaskStore:
    """
    In-memory canonical task collection for one day.

    Invariants:
    - ordered ascending by start_time (stable sort, so equal starts keep insertion order)
    - descriptions are unique, compared case-insensitively

    Thread-safety:
    - none of its own; ScheduleManager serializes every call under its lock
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.debug("TaskStore ready")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- mutation ----

    def insert(self, task: Task) -> None:
        if self.find_by_description(task.description) is not None:
            raise DuplicateTaskError(task.description)
        self._tasks.append(task)
        self.resort()
        logger.debug("Task stored description=%s total=%d", task.description, len(self._tasks))

    def remove(self, task: Task) -> Task:
        """Detach the stored task whose description matches `task`'s; returns the stored instance."""
        key = task.key
        for i, t in enumerate(self._tasks):
            if t.key == key:
                del self._tasks[i]
                logger.debug("Task detached description=%s total=%d", t.description, len(self._tasks))
                return t
        raise TaskNotFoundError()

    def resort(self) -> None:
        self._tasks.sort(key=_start_key)

    # ---- queries ----

    def find_by_description(self, text: str) -> Task | None:
        key = (text or "").strip().casefold()
        if not key:
            return None
        for t in self._tasks:
            if t.key == key:
                return t
        return None

    def all(self) -> list[Task]:
        """Snapshot: copies of the stored tasks in start-time order."""
        return [replace(t) for t in self._tasks]

    def by_priority(self, label: str) -> list[Task]:
        """Snapshot of tasks whose priority matches `label` case-insensitively."""
        wanted = (label or "").strip().casefold()
        out = [replace(t) for t in self._tasks if t.priority.casefold() == wanted]
        out.sort(key=_start_key)
        return out
