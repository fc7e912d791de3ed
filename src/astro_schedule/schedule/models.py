# src/astro_schedule/schedule/models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ScheduleError

TIME_FORMAT = "%H:%M"


@dataclass(slots=True)
class Task:
    description: str
    start_time: time
    end_time: time
    priority: str
    completed: bool = False

    @property
    def key(self) -> str:
        """Case-insensitive identity used for lookup, removal and edits."""
        return self.description.strip().casefold()

    def mark_completed(self) -> None:
        self.completed = True

    def __str__(self) -> str:
        line = (
            f"{self.start_time.strftime(TIME_FORMAT)} - {self.end_time.strftime(TIME_FORMAT)}: "
            f"{self.description} [{self.priority}]"
        )
        if self.completed:
            line += " [Completed]"
        return line


class ResultKind(StrEnum):
    SUCCESS = "success"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_INTERVAL = "invalid_interval"
    DUPLICATE = "duplicate"
    INVALID_DESCRIPTION = "invalid_description"


@dataclass(slots=True, frozen=True)
class ScheduleResult:
    """
    Value-level outcome of a ScheduleManager operation.

    The manager never raises for bad input; front ends render `message`
    and branch on `kind`.
    """

    kind: ResultKind
    message: str
    task: Task | None = None
    conflicting_description: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @classmethod
    def success(cls, message: str, task: Task | None = None) -> ScheduleResult:
        return cls(kind=ResultKind.SUCCESS, message=message, task=task)

    @classmethod
    def conflict(cls, task: Task, existing: Task) -> ScheduleResult:
        return cls(
            kind=ResultKind.CONFLICT,
            message=f'Error: Task conflicts with existing task "{existing.description}".',
            task=task,
            conflicting_description=existing.description,
        )

    @classmethod
    def rejected(cls, error: ScheduleError, task: Task | None = None) -> ScheduleResult:
        return cls(kind=error.kind, message=error.message, task=task)

    @classmethod
    def not_found(cls) -> ScheduleResult:
        return cls(kind=ResultKind.NOT_FOUND, message="Error: Task not found.")


class EventKind(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    CONFLICT = "conflict"
    UPDATED = "updated"


@dataclass(slots=True, frozen=True)
class TaskEvent:
    """
    Notification payload.

    `existing` is only set for CONFLICT: the stored task the new one collided with.
    Task references are only guaranteed valid for the duration of the call.
    """

    kind: EventKind
    task: Task
    existing: Task | None = None
