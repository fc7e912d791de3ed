# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from astro_schedule.cli.bootstrap import create_initial_state
from astro_schedule.core.state import AppState
from astro_schedule.schedule.manager import ScheduleManager

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="astro-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_file=tmp_path / "data" / "schedule.log",
        console_notifications=False,
        isolate_listener_errors=True,
    )


@pytest.fixture()
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture()
def manager(recorder: RecordingListener) -> ScheduleManager:
    m = ScheduleManager()
    m.register_listener(recorder)
    return m


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired exactly as the CLI wires it (no console notifications)."""
    return create_initial_state(settings=settings)
