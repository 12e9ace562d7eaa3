# src/timetable_companion/schedule/day_view.py

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from .models import TimetableEntry
from .time_range import is_completed, is_live, liveness, parse_time_range, round_half_away


@dataclass(frozen=True, slots=True)
class DayStats:
    completed: int
    total: int
    percentage: int
    by_type: dict[str, int] = field(default_factory=dict)


def find_live_entry(
    entries: Sequence[TimetableEntry], now: datetime
) -> tuple[int, TimetableEntry] | None:
    """First entry whose time range contains `now` (timetables may overlap)."""
    for i, entry in enumerate(entries):
        if is_live(entry.time, now):
            return i, entry
    return None


def day_stats(entries: Sequence[TimetableEntry], now: datetime) -> DayStats:
    total = len(entries)
    completed = sum(1 for e in entries if is_completed(e.time, now))
    percentage = round_half_away(completed / total * 100) if total else 0
    by_type = dict(Counter(e.type for e in entries))
    return DayStats(completed=completed, total=total, percentage=percentage, by_type=by_type)


def week_progress(now: datetime) -> int:
    """Share of the week elapsed, Monday 00:00 being 0%."""
    day_index = now.weekday()
    day_fraction = (now.hour * 60 + now.minute) / (24 * 60)
    pct = round_half_away((day_index + day_fraction) / 7 * 100)
    return max(0, min(pct, 100))


def describe_entry(entry: TimetableEntry, now: datetime) -> str:
    state = liveness(entry.time, now)
    if state.is_live:
        status = f"LIVE {state.progress_percent}%"
    elif state.is_completed:
        status = "done"
    elif parse_time_range(entry.time, now).is_bounded:
        status = "upcoming"
    else:
        status = "-"
    return f"{entry.time:<18} {entry.subject} [{status}]"
