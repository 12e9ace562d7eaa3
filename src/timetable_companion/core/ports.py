# src/timetable_companion/core/ports.py

"""
Ports (interfaces) used by the core.

The service and the live watcher depend on Protocols instead of concrete
implementations, so the JSON store / console output can be swapped in tests.
"""

from __future__ import annotations

from typing import Awaitable, Protocol

from ..schedule.models import Timetable, TimetableEntry


class TimetableRepo(Protocol):
    """Storage side of the timetable (see schedule.store.TimetableStore)."""

    def timetable(self) -> Timetable: ...
    def get_day(self, day: str) -> list[TimetableEntry]: ...
    def update_entry(self, day: str, index: int, entry: TimetableEntry) -> None: ...
    def replace_day(self, day: str, entries: list[TimetableEntry]) -> None: ...


class OutboundNotifier(Protocol):
    """
    Connector-side port: how background services (live watcher) push text out.

    The console connector prints; other connectors may route elsewhere.
    """

    def send_text(self, *, text: str) -> Awaitable[None]: ...
