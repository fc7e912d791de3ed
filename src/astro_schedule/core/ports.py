# src/astro_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by front ends.

Connectors and command handlers depend on these Protocols rather than on
ScheduleManager directly, so tests can swap in fakes.
"""

from typing import Protocol

from ..schedule.models import ScheduleResult, Task
from ..schedule.observers import TaskListener


class Scheduler(Protocol):
    """The synchronous call surface of the scheduling engine."""

    def add_task(self, task: Task) -> ScheduleResult: ...

    def add_task_from_text(
            self,
            description: str,
            start_text: str,
            end_text: str,
            priority: str,
    ) -> ScheduleResult: ...

    def remove_task(self, description: str) -> ScheduleResult: ...
    def edit_task(self, description: str, new_start_text: str, new_end_text: str) -> ScheduleResult: ...
    def mark_task_completed(self, description: str) -> ScheduleResult: ...
    def view_tasks(self) -> list[Task]: ...
    def view_tasks_by_priority(self, priority: str) -> list[Task]: ...

    def register_listener(self, listener: TaskListener) -> None: ...
    def unregister_listener(self, listener: TaskListener) -> None: ...
