# src/timetable_companion/core/service.py

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, assert_never

from ..schedule.day_view import DayStats, day_stats, find_live_entry
from ..schedule.lessons import export_lessons, lessons_from_timetable
from ..schedule.models import TimetableEntry, normalize_day, weekday_name
from ..schedule.time_range import ResolvedRange, TaskLiveness, liveness, parse_time_range
from ..schedule.validation import InvalidTimetable, parse_day_sections
from .ports import TimetableRepo
from .requests import (
    ExportLessons,
    GetDay,
    GetDayStats,
    GetLiveEntry,
    ImportDays,
    Request,
    ResolveTime,
    UpdateEntry,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LiveEntry:
    day: str
    index: int
    entry: TimetableEntry
    liveness: TaskLiveness


@dataclass(frozen=True, slots=True)
class TimeResolution:
    text: str
    resolved: ResolvedRange
    liveness: TaskLiveness


class TimetableService:
    """
    Application service over a TimetableRepo: one method per request type.

    Reads are cheap and lock-free; writes are serialized with a lock because
    the live watcher reads from a background thread.
    """

    def __init__(
        self,
        repo: TimetableRepo,
        *,
        schedule_id: str = "default",
        export_path: str | Path = "lessons.json",
    ) -> None:
        self._repo = repo
        self._schedule_id = schedule_id
        self._export_path = Path(export_path)
        self._write_lock = threading.Lock()

    def get_day(self, day: str) -> list[TimetableEntry]:
        return self._repo.get_day(normalize_day(day))

    def get_live_entry(self, now: datetime) -> LiveEntry | None:
        day = weekday_name(now)
        found = find_live_entry(self._repo.get_day(day), now)
        if found is None:
            return None
        index, entry = found
        return LiveEntry(day=day, index=index, entry=entry, liveness=liveness(entry.time, now))

    def get_day_stats(self, day: str, now: datetime) -> DayStats:
        return day_stats(self._repo.get_day(normalize_day(day)), now)

    def resolve_time(self, text: str, now: datetime) -> TimeResolution:
        return TimeResolution(text=text, resolved=parse_time_range(text, now), liveness=liveness(text, now))

    def update_entry(self, day: str, index: int, entry: TimetableEntry) -> None:
        with self._write_lock:
            self._repo.update_entry(normalize_day(day), index, entry)

    def export_lessons(self, path: Path | None = None) -> int:
        target = path or self._export_path
        lessons = lessons_from_timetable(self._repo.timetable(), self._schedule_id)
        return export_lessons(lessons, target)

    def import_days(self, path: Path) -> list[str]:
        """Replace the days present in a JSON file; other days are left alone."""
        try:
            raw = json.loads(Path(path).read_text("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidTimetable(f"{path}: not valid UTF-8 JSON ({e})") from e
        sections = parse_day_sections(raw)
        with self._write_lock:
            for day, entries in sections.items():
                self._repo.replace_day(day, entries)
        logger.info("Imported %d day(s) from %s", len(sections), path)
        return list(sections)


def dispatch(service: TimetableService, request: Request) -> Any:
    """Route a typed request to the matching service method."""
    if isinstance(request, GetDay):
        return service.get_day(request.day)
    if isinstance(request, GetLiveEntry):
        return service.get_live_entry(request.now)
    if isinstance(request, GetDayStats):
        return service.get_day_stats(request.day, request.now)
    if isinstance(request, ResolveTime):
        return service.resolve_time(request.text, request.now)
    if isinstance(request, UpdateEntry):
        return service.update_entry(request.day, request.index, request.entry)
    if isinstance(request, ExportLessons):
        return service.export_lessons(request.path)
    if isinstance(request, ImportDays):
        return service.import_days(request.path)
    assert_never(request)
