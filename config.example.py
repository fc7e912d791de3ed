# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name (default: astro-schedule).",
    "ASTRO_LOG_LEVEL": "Level written to the log file (default: INFO).",
    # Paths (gitignored)
    "ASTRO_DATA_DIR": "Local data directory (default: .local/astro).",
    "ASTRO_LOG_FILE": "Schedule log file, appended across runs (default: <data_dir>/schedule.log).",
    # Console
    "ASTRO_CONSOLE_NOTIFICATIONS": "Print 'Notification: ...' lines on every change (default: true).",
    # Listeners
    "ASTRO_ISOLATE_LISTENER_ERRORS": (
        "Log and skip a failing listener instead of aborting the fan-out (default: true)."
    ),
}
