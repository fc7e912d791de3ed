# src/astro_schedule/schedule/errors.py

from __future__ import annotations

from .models import ResultKind


class ScheduleError(ValueError):
    """Base class for rejected schedule input. `kind` maps it onto a ScheduleResult."""

    kind: ResultKind = ResultKind.INVALID_TIME_FORMAT
    default_message = "Error: Invalid input."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidTimeFormatError(ScheduleError):
    kind = ResultKind.INVALID_TIME_FORMAT
    default_message = "Error: Invalid time format."


class InvalidIntervalError(ScheduleError):
    kind = ResultKind.INVALID_INTERVAL
    default_message = "Error: End time must be after start time."


class InvalidDescriptionError(ScheduleError):
    kind = ResultKind.INVALID_DESCRIPTION
    default_message = "Error: Task description must not be empty."


class DuplicateTaskError(ScheduleError):
    kind = ResultKind.DUPLICATE

    def __init__(self, description: str) -> None:
        super().__init__(f'Error: Task "{description}" already exists.')
        self.description = description


class TaskNotFoundError(ScheduleError):
    kind = ResultKind.NOT_FOUND
    default_message = "Error: Task not found."
