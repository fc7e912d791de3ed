# src/astro_schedule/schedule/conflicts.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import time

from .models import Task


def intervals_overlap(start1: time, end1: time, start2: time, end2: time) -> bool:
    """
    Inclusive overlap: [s1, e1] and [s2, e2] overlap when s1 <= e2 and s2 <= e1.

    A task ending at 10:00 conflicts with one starting at 10:00.
    """
    return start1 <= end2 and start2 <= end1


def find_conflict(candidate: Task, existing: Iterable[Task]) -> Task | None:
    """
    Return the first task in `existing` whose interval overlaps `candidate`, or None.

    Matching descriptions are not skipped; callers that need to exclude a task
    (edits) filter it out of `existing` themselves.
    """
    for task in existing:
        if intervals_overlap(task.start_time, task.end_time, candidate.start_time, candidate.end_time):
            return task
    return None
