# src/astro_schedule/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows astro_schedule records; anything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.startswith("astro_schedule.") or record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path = ".local/astro/schedule.log",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route logs to stderr (WARNING+, so the REPL stays readable) and to the
    schedule log file, which is appended to across runs.

    Call once, before the first log record.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())

    schedule_log = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
    schedule_log.setLevel(file_level)
    schedule_log.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(schedule_log)
    logging.captureWarnings(True)
