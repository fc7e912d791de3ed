# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from astro_schedule.schedule.models import EventKind, TaskEvent


@dataclass(slots=True)
class RecordedEvent:
    kind: EventKind
    description: str
    existing_description: str | None


@dataclass(slots=True)
class RecordingListener:
    """
    Listener that captures every event for assertions.

    Only descriptions are kept: task references are valid for the duration of the call.
    """

    events: list[RecordedEvent] = field(default_factory=list)

    def __call__(self, event: TaskEvent) -> None:
        self.events.append(
            RecordedEvent(
                kind=event.kind,
                description=event.task.description,
                existing_description=event.existing.description if event.existing else None,
            )
        )

    @property
    def kinds(self) -> list[EventKind]:
        return [e.kind for e in self.events]


class ExplodingListener:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, event: TaskEvent) -> None:
        self.calls += 1
        raise RuntimeError("listener boom")
