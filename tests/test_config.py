# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from astro_schedule.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "ASTRO_APP_NAME",
        "ASTRO_LOG_LEVEL",
        "ASTRO_DATA_DIR",
        "ASTRO_LOG_FILE",
        "ASTRO_CONSOLE_NOTIFICATIONS",
        "ASTRO_ISOLATE_LISTENER_ERRORS",
    ):
        monkeypatch.delenv(key, raising=False)

    s = Settings.from_env()

    assert s.app_name == "astro-schedule"
    assert s.data_dir == Path(".local/astro")
    assert s.log_file == Path(".local/astro") / "schedule.log"
    assert s.console_notifications is True
    assert s.isolate_listener_errors is True


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ASTRO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("ASTRO_LOG_FILE", raising=False)
    monkeypatch.setenv("ASTRO_ISOLATE_LISTENER_ERRORS", "no")
    monkeypatch.setenv("ASTRO_CONSOLE_NOTIFICATIONS", "0")

    s = Settings.from_env()

    assert s.log_file == tmp_path / "schedule.log"
    assert s.isolate_listener_errors is False
    assert s.console_notifications is False
