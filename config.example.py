# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TIMETABLE_APP_NAME": "App display name (default: timetable).",
    "TIMETABLE_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TIMETABLE_CONSOLE_ENABLED": "Enable the console REPL (true/false).",
    "TIMETABLE_WATCH_ENABLED": "Enable 'Live now' announcements (true/false).",
    "TIMETABLE_WATCH_INTERVAL_SECONDS": "Live watcher polling interval (default: 60).",
    # Schedule
    "TIMETABLE_SCHEDULE_NAME": "Display name of the schedule (default: Study Schedule).",
    "TIMETABLE_SCHEDULE_ID": "Prefix for exported lesson ids (default: default).",
    "TIMETABLE_TIMEZONE": "IANA zone for 'now', e.g. Asia/Kolkata (default: system local).",
    # Paths (gitignored)
    "TIMETABLE_DATA_DIR": "Local data directory (default: .local/timetable).",
    "TIMETABLE_TIMETABLE_PATH": "Timetable JSON path (default: <data_dir>/timetable.json).",
    "TIMETABLE_LESSONS_EXPORT_PATH": "Lesson export path (default: <data_dir>/lessons.json).",
}
