# tests/test_conflicts.py

from __future__ import annotations

import pytest

from astro_schedule.schedule.conflicts import find_conflict, intervals_overlap
from astro_schedule.schedule.task_factory import create_task


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (("09:00", "10:00"), ("10:00", "11:00"), True),  # touching boundary
        (("09:00", "09:59"), ("10:00", "11:00"), False),
        (("09:00", "12:00"), ("10:00", "11:00"), True),  # containment
        (("09:30", "10:30"), ("10:00", "11:00"), True),
        (("13:00", "14:00"), ("10:00", "11:00"), False),
    ],
)
def test_overlap_is_inclusive_and_symmetric(a, b, expected) -> None:
    ta = create_task("A", a[0], a[1], "High")
    tb = create_task("B", b[0], b[1], "Low")

    assert (find_conflict(ta, [tb]) is not None) is expected
    assert (find_conflict(tb, [ta]) is not None) is expected
    assert intervals_overlap(ta.start_time, ta.end_time, tb.start_time, tb.end_time) is expected


def test_find_conflict_returns_first_in_iteration_order() -> None:
    early = create_task("Early", "08:00", "09:30", "Low")
    late = create_task("Late", "09:45", "11:00", "Low")
    candidate = create_task("Wide", "09:00", "10:00", "Low")

    assert find_conflict(candidate, [early, late]) is early
    assert find_conflict(candidate, []) is None


def test_same_description_is_still_checked_on_time() -> None:
    existing = create_task("Lunch", "12:00", "13:00", "Medium")
    candidate = create_task("lunch", "12:30", "13:30", "Medium")

    assert find_conflict(candidate, [existing]) is existing
