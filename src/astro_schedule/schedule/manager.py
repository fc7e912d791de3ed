# src/astro_schedule/schedule/manager.py

from __future__ import annotations

"""
Schedule manager.

The facade every caller goes through. It composes:
- TaskStore (canonical, start-time ordered collection),
- find_conflict (inclusive overlap check),
- ObserverRegistry (synchronous fan-out of ADDED / REMOVED / CONFLICT / UPDATED).

Every public operation holds one re-entrant lock for its full duration, including
the conflict check, the store mutation and the listener fan-out. Mutations are
therefore fully serialized and listeners see events in mutation order. A slow
listener stalls every other caller behind it.

Bad input never raises out of this class: each operation returns a ScheduleResult.
"""

import logging
import threading

from .conflicts import find_conflict
from .errors import InvalidDescriptionError, InvalidIntervalError, ScheduleError
from .models import EventKind, ScheduleResult, Task
from .observers import ObserverRegistry, TaskListener
from .task_factory import create_task, parse_interval
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class ScheduleManager:
    def __init__(
        self,
        *,
        store: TaskStore | None = None,
        observers: ObserverRegistry | None = None,
    ) -> None:
        self._store = store if store is not None else TaskStore()
        self._observers = observers if observers is not None else ObserverRegistry()
        self._lock = threading.RLock()

    # ---- listeners ----

    def register_listener(self, listener: TaskListener) -> None:
        self._observers.register(listener)

    def unregister_listener(self, listener: TaskListener) -> None:
        self._observers.unregister(listener)

    # ---- mutations ----

    def add_task(self, task: Task) -> ScheduleResult:
        task.description = task.description.strip()
        if not task.description:
            return ScheduleResult.rejected(InvalidDescriptionError(), task)
        if task.end_time <= task.start_time:
            return ScheduleResult.rejected(InvalidIntervalError(), task)

        with self._lock:
            conflict = find_conflict(task, self._store)
            if conflict is not None:
                logger.debug("add_task conflict new=%s existing=%s", task.description, conflict.description)
                self._observers.notify(EventKind.CONFLICT, task, conflict)
                return ScheduleResult.conflict(task, conflict)

            try:
                self._store.insert(task)
            except ScheduleError as e:
                logger.debug("add_task rejected description=%s: %s", task.description, e)
                return ScheduleResult.rejected(e, task)

            self._observers.notify(EventKind.ADDED, task)
            return ScheduleResult.success("Task added successfully. No conflicts.", task)

    def add_task_from_text(
        self,
        description: str,
        start_text: str,
        end_text: str,
        priority: str,
    ) -> ScheduleResult:
        """Validate raw text through the task factory, then add_task()."""
        try:
            task = create_task(description, start_text, end_text, priority)
        except ScheduleError as e:
            return ScheduleResult.rejected(e)
        return self.add_task(task)

    def remove_task(self, description: str) -> ScheduleResult:
        with self._lock:
            task = self._store.find_by_description(description)
            if task is None:
                logger.debug("remove_task not found description=%s", description)
                return ScheduleResult.not_found()

            self._store.remove(task)
            self._observers.notify(EventKind.REMOVED, task)
            return ScheduleResult.success("Task removed successfully.", task)

    def edit_task(self, description: str, new_start_text: str, new_end_text: str) -> ScheduleResult:
        """
        Move a task to a new interval.

        Checks run in order: lookup -> time format -> interval -> conflicts against
        every *other* task. Any failure leaves the stored task exactly as it was.
        """
        with self._lock:
            task = self._store.find_by_description(description)
            if task is None:
                return ScheduleResult.not_found()

            try:
                start, end = parse_interval(new_start_text, new_end_text)
            except ScheduleError as e:
                return ScheduleResult.rejected(e, task)

            candidate = Task(
                description=task.description,
                start_time=start,
                end_time=end,
                priority=task.priority,
                completed=task.completed,
            )
            others = [t for t in self._store if t is not task]
            conflict = find_conflict(candidate, others)
            if conflict is not None:
                logger.debug("edit_task conflict task=%s existing=%s", task.description, conflict.description)
                return ScheduleResult.conflict(task, conflict)

            task.start_time = start
            task.end_time = end
            self._store.resort()
            self._observers.notify(EventKind.UPDATED, task)
            return ScheduleResult.success("Task updated successfully.", task)

    def mark_task_completed(self, description: str) -> ScheduleResult:
        with self._lock:
            task = self._store.find_by_description(description)
            if task is None:
                return ScheduleResult.not_found()

            task.mark_completed()
            self._observers.notify(EventKind.UPDATED, task)
            return ScheduleResult.success("Task marked as completed.", task)

    # ---- queries ----

    def view_tasks(self) -> list[Task]:
        with self._lock:
            return self._store.all()

    def view_tasks_by_priority(self, priority: str) -> list[Task]:
        with self._lock:
            return self._store.by_priority(priority)
