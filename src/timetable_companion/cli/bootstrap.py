# src/timetable_companion/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (store/service/notifier/clock).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import OutboundNotifier
from ..core.service import TimetableService
from ..core.state import AppState
from ..schedule.store import TimetableStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.timetable_path.parent.mkdir(parents=True, exist_ok=True)
    settings.lessons_export_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, notifier: OutboundNotifier | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TimetableStore(settings.timetable_path)
    store.load()

    service = TimetableService(
        store,
        schedule_id=settings.schedule_id,
        export_path=settings.lessons_export_path,
    )

    return AppState(
        settings=settings,
        store=store,
        service=service,
        notifier=notifier or ConsoleNotifier(),
        clock=settings.now,
    )
