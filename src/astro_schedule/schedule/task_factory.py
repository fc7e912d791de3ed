# src/astro_schedule/schedule/task_factory.py

from __future__ import annotations

"""
Task construction from raw user text.

Times are strict 24h "HH:MM": exactly two digits for the hour (00-23) and two for
the minute (00-59), ASCII digits only. "9:00", "09:0", "24:00" and "09:00:00" are all format errors.
"""

import re
from datetime import time

from .errors import InvalidDescriptionError, InvalidIntervalError, InvalidTimeFormatError
from .models import Task

TIME_REGEX = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


def parse_time(text: str) -> time:
    m = TIME_REGEX.match((text or "").strip())
    if not m:
        raise InvalidTimeFormatError()
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def parse_interval(start_text: str, end_text: str) -> tuple[time, time]:
    """Parse both ends, then require end strictly after start (equal is rejected too)."""
    start = parse_time(start_text)
    end = parse_time(end_text)
    if end <= start:
        raise InvalidIntervalError()
    return start, end


def create_task(description: str, start_text: str, end_text: str, priority: str) -> Task:
    desc = (description or "").strip()
    if not desc:
        raise InvalidDescriptionError()

    start, end = parse_interval(start_text, end_text)
    return Task(
        description=desc,
        start_time=start,
        end_time=end,
        priority=(priority or "").strip(),
        completed=False,
    )
