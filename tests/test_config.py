# tests/test_config.py

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from timetable_companion.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_NAME",
        "DATA_DIR",
        "TIMETABLE_PATH",
        "LESSONS_EXPORT_PATH",
        "WATCH_ENABLED",
        "WATCH_INTERVAL_SECONDS",
        "TIMEZONE",
        "SCHEDULE_ID",
    ):
        monkeypatch.delenv(f"TIMETABLE_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "timetable"
    assert s.data_dir == Path(".local/timetable")
    assert s.timetable_path == Path(".local/timetable/timetable.json")
    assert s.watch_enabled is True
    assert s.watch_interval_seconds == 60
    assert s.tz() is None


def test_env_overrides_and_derived_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TIMETABLE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TIMETABLE_WATCH_ENABLED", "off")
    monkeypatch.setenv("TIMETABLE_WATCH_INTERVAL_SECONDS", "15")
    monkeypatch.setenv("TIMETABLE_SCHEDULE_ID", " jee ")

    s = Settings.from_env()
    assert s.timetable_path == tmp_path / "timetable.json"
    assert s.lessons_export_path == tmp_path / "lessons.json"
    assert s.watch_enabled is False
    assert s.watch_interval_seconds == 15
    assert s.schedule_id == "jee"


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMETABLE_WATCH_INTERVAL_SECONDS", "soon")
    monkeypatch.setenv("TIMETABLE_TIMEZONE", "Not/AZone")

    s = Settings.from_env()
    assert s.watch_interval_seconds == 60
    assert s.tz() is None
    assert s.now().tzinfo is None


def test_timezone_aware_now(monkeypatch: pytest.MonkeyPatch) -> None:
    try:
        ZoneInfo("UTC")
    except ZoneInfoNotFoundError:
        pytest.skip("no tz database available")
    monkeypatch.setenv("TIMETABLE_TIMEZONE", "UTC")
    s = Settings.from_env()
    assert s.now().tzinfo is not None
