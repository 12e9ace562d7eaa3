# src/timetable_companion/core/requests.py

"""
Requests understood by TimetableService.

A closed set of frozen dataclasses, one per operation. Connectors build one of
these and hand it to service.dispatch(); there is no (channel, method) string
routing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..schedule.models import TimetableEntry


@dataclass(frozen=True, slots=True)
class GetDay:
    day: str


@dataclass(frozen=True, slots=True)
class GetLiveEntry:
    now: datetime


@dataclass(frozen=True, slots=True)
class GetDayStats:
    day: str
    now: datetime


@dataclass(frozen=True, slots=True)
class ResolveTime:
    text: str
    now: datetime


@dataclass(frozen=True, slots=True)
class UpdateEntry:
    day: str
    index: int
    entry: TimetableEntry


@dataclass(frozen=True, slots=True)
class ExportLessons:
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ImportDays:
    path: Path


Request = GetDay | GetLiveEntry | GetDayStats | ResolveTime | UpdateEntry | ExportLessons | ImportDays
