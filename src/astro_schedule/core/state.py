# src/astro_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ports import Scheduler, TaskListener


@dataclass
class AppState:
    # Settings object (config.Settings or a test namespace).
    settings: Any

    # The one scheduler instance for this process; passed explicitly to every caller.
    scheduler: Scheduler

    # Listeners wired by bootstrap, kept so shutdown can detach them.
    listeners: list[TaskListener] = field(default_factory=list)
