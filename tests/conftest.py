# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from timetable_companion.core.service import TimetableService
from timetable_companion.core.state import AppState
from timetable_companion.schedule.store import TimetableStore

from .fakes import FakeClock, FakeNotifier

# Monday, 15:00: "2:00 – 4:00 PM Math Practice" is live in the default timetable.
MONDAY_3PM = datetime(2025, 11, 10, 15, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="timetable-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        timetable_path=tmp_path / "timetable.json",
        lessons_export_path=tmp_path / "lessons.json",
        schedule_name="Test Schedule",
        schedule_id="test",
        timezone="",
        console_enabled=False,
        watch_enabled=False,
        watch_interval_seconds=60,
        now=lambda: MONDAY_3PM,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(MONDAY_3PM)


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TimetableStore:
    """Store on a tmp path, starting from the bundled default timetable."""
    s = TimetableStore(settings.timetable_path)
    s.load()
    return s


@pytest.fixture()
def service(store: TimetableStore, settings: SimpleNamespace) -> TimetableService:
    return TimetableService(
        store,
        schedule_id=settings.schedule_id,
        export_path=settings.lessons_export_path,
    )


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    store: TimetableStore,
    service: TimetableService,
    notifier: FakeNotifier,
    clock: FakeClock,
) -> AppState:
    """AppState wired with a real JSON store (tmp path), a fake notifier and a pinned clock."""
    return AppState(
        settings=settings,
        store=store,
        service=service,
        notifier=notifier,
        clock=clock,
    )
