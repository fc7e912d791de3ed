# src/astro_schedule/schedule/observers.py

from __future__ import annotations

"""
Listener registry.

Listeners are plain callables taking a TaskEvent. Fan-out is synchronous and
ordered by registration: notify() does not return until every listener ran.

Failure policy:
- isolate_errors=True (default): a failing listener is logged and skipped,
  the remaining listeners still receive the event.
- isolate_errors=False: the first failure aborts the fan-out and propagates.
"""

import logging
import threading
from collections.abc import Callable

from .models import EventKind, Task, TaskEvent

logger = logging.getLogger(__name__)

TaskListener = Callable[[TaskEvent], None]


class ObserverRegistry:
    def __init__(self, *, isolate_errors: bool = True) -> None:
        self._listeners: list[TaskListener] = []
        self._lock = threading.Lock()
        self.isolate_errors = isolate_errors

    def register(self, listener: TaskListener) -> None:
        with self._lock:
            self._listeners.append(listener)
        logger.debug("Listener registered: %r", listener)

    def unregister(self, listener: TaskListener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return
        logger.debug("Listener unregistered: %r", listener)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def notify(self, kind: EventKind, task: Task, existing: Task | None = None) -> None:
        event = TaskEvent(kind=kind, task=task, existing=existing)

        # Registration during a fan-out only affects later notifications.
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            if not self.isolate_errors:
                listener(event)
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s event for %r", listener, kind.value, task.description)


class TaskObserver:
    """
    Convenience base for listeners that prefer one method per event kind.

    Instances are callables, so they register like any other listener.
    """

    def __init__(self) -> None:
        self._dispatch: dict[EventKind, Callable[[TaskEvent], None]] = {
            EventKind.ADDED: lambda e: self.on_task_added(e.task),
            EventKind.REMOVED: lambda e: self.on_task_removed(e.task),
            EventKind.CONFLICT: lambda e: self.on_task_conflict(e.task, e.existing),
            EventKind.UPDATED: lambda e: self.on_task_updated(e.task),
        }

    def __call__(self, event: TaskEvent) -> None:
        self._dispatch[event.kind](event)

    def on_task_added(self, task: Task) -> None:
        pass

    def on_task_removed(self, task: Task) -> None:
        pass

    def on_task_conflict(self, task: Task, existing: Task | None) -> None:
        pass

    def on_task_updated(self, task: Task) -> None:
        pass
