# src/timetable_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
- Components get settings injected; get_settings() is only for the composition root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

ENV_PREFIX = "TIMETABLE"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool
    watch_enabled: bool
    watch_interval_seconds: int

    # ---- Schedule ----
    schedule_name: str
    schedule_id: str
    timezone: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    timetable_path: Path
    lessons_export_path: Path

    def tz(self) -> tzinfo | None:
        """Configured zone, or None for system local time (also on unknown names)."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return None

    def now(self) -> datetime:
        tz = self.tz()
        return datetime.now(tz) if tz is not None else datetime.now()

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="timetable") or "timetable"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        watch_enabled = _env_bool(_k("WATCH_ENABLED"), True)
        watch_interval_seconds = max(1, _env_int(_k("WATCH_INTERVAL_SECONDS"), 60))

        schedule_name = _env(_k("SCHEDULE_NAME"), "Study Schedule")
        schedule_id = (_env(_k("SCHEDULE_ID"), "default") or "default").strip()
        timezone = _env(_k("TIMEZONE"), "").strip()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/timetable"))
        timetable_path = _env_path(_k("TIMETABLE_PATH"), data_dir / "timetable.json")
        lessons_export_path = _env_path(_k("LESSONS_EXPORT_PATH"), data_dir / "lessons.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            watch_enabled=watch_enabled,
            watch_interval_seconds=watch_interval_seconds,
            schedule_name=schedule_name,
            schedule_id=schedule_id,
            timezone=timezone,
            data_dir=data_dir,
            timetable_path=timetable_path,
            lessons_export_path=lessons_export_path,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for the connector switches.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(SETTINGS, "console_enabled", bool(_config_local.CONSOLE_ENABLED))  # type: ignore[misc]
    if hasattr(_config_local, "WATCH_ENABLED"):
        object.__setattr__(SETTINGS, "watch_enabled", bool(_config_local.WATCH_ENABLED))  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
