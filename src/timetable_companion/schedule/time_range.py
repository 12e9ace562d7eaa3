# src/timetable_companion/schedule/time_range.py

"""
Time-range resolution for timetable entries.

Entries carry human-written time strings such as "9:30 – 11:00 AM",
"2:00 PM - 4:30 PM", "3:00 PM" or "10:00 PM onwards". This module turns them
into concrete start/end datetimes on the day of a reference datetime and
derives liveness facts (live / completed / progress) from them.

Rules:
- the resolver never raises: anything it cannot read resolves to (None, None)
- a missing start AM/PM is inferred from the end marker and the hour numbers
- single times ("3:00 PM") become a fixed 30-minute block
- everything stays on the reference calendar day, including overnight ranges
  like "11:30 - 1:30 AM" (start ends up after end)

split_range_text() is the strict counterpart used when importing entries into
separate start/end fields; it raises InvalidTimeRangeFormat.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

POINT_DURATION = timedelta(minutes=30)
OPEN_ENDED_MARKER = "onwards"

_TIME_POINT_RE = re.compile(r"(\d{1,2}):(\d{2})\s*([AP]M)", re.IGNORECASE)
_RANGE_RE = re.compile(
    r"(\d{1,2}:\d{2})(?:\s*([AP]M))?\s*[–—-]\s*(\d{1,2}:\d{2})\s*([AP]M)",
    re.IGNORECASE,
)
_DASHES_RE = re.compile(r"[–—]")


class InvalidTimeRangeFormat(ValueError):
    """Raised by split_range_text when the text is not exactly two dash-separated parts."""


@dataclass(frozen=True, slots=True)
class ResolvedRange:
    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def __iter__(self) -> Iterator[datetime | None]:
        yield self.start
        yield self.end


UNRESOLVED = ResolvedRange()


@dataclass(frozen=True, slots=True)
class TaskLiveness:
    is_live: bool
    is_completed: bool
    progress_percent: int


def round_half_away(value: float) -> int:
    """Round to the nearest int, with .5 going away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _day_start(reference: datetime | date) -> datetime:
    if isinstance(reference, datetime):
        return reference.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(reference, time(0))


def _to_24h(hour: int, meridiem: str) -> int:
    meridiem = meridiem.upper()
    if meridiem == "PM" and hour != 12:
        return hour + 12
    if meridiem == "AM" and hour == 12:
        return 0
    return hour


def parse_time_point(text: str, reference: datetime | date) -> datetime | None:
    """
    Parse "H:MM AM" / "HH:MM PM" (space optional, case-insensitive) onto the
    calendar day of `reference`.

    Minutes are not range-checked; "9:75 AM" rolls over to 10:15.
    """
    if not text:
        return None
    m = _TIME_POINT_RE.search(text)
    if not m:
        return None

    hour = _to_24h(int(m.group(1)), m.group(3))
    minute = int(m.group(2))
    return _day_start(reference) + timedelta(hours=hour, minutes=minute)


def infer_start_meridiem(start_hour: int, end_hour: int, end_meridiem: str) -> str:
    """Guess the AM/PM of a range start written without one ("2:00 - 4:00 PM")."""
    end_meridiem = end_meridiem.upper()

    if end_meridiem == "PM":
        if start_hour == 12:
            return "PM"
        if start_hour < 12 and start_hour < end_hour:
            return "PM"
        if start_hour < 12 and start_hour > end_hour:
            # Crosses noon: "11:30 - 1:30 PM"
            return "AM"
        return "PM"

    if start_hour == 12:
        return "AM"
    if start_hour > end_hour:
        # Overnight: "11:30 - 1:30 AM". End stays on the same day.
        return "PM"
    return "AM"


def parse_time_range(text: str, reference: datetime | date) -> ResolvedRange:
    """Resolve a timetable time string to start/end datetimes; unreadable text gives UNRESOLVED."""
    if not text:
        return UNRESOLVED
    if OPEN_ENDED_MARKER in text:
        return UNRESOLVED

    m = _RANGE_RE.search(text)
    if m:
        start_time, start_meridiem, end_time, end_meridiem = m.groups()
        if not start_meridiem:
            start_hour = int(start_time.split(":")[0])
            end_hour = int(end_time.split(":")[0])
            start_meridiem = infer_start_meridiem(start_hour, end_hour, end_meridiem)

        start = parse_time_point(f"{start_time} {start_meridiem}", reference)
        end = parse_time_point(f"{end_time} {end_meridiem}", reference)
        return ResolvedRange(start=start, end=end)

    point = parse_time_point(text, reference)
    if point is not None:
        return ResolvedRange(start=point, end=point + POINT_DURATION)

    return UNRESOLVED


def _instant(value: datetime) -> datetime:
    # Aware datetimes sharing a tzinfo compare and subtract by wall clock;
    # UTC gives real elapsed time across a DST change.
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def _progress(start: datetime, end: datetime, now: datetime) -> int:
    start, end, now = _instant(start), _instant(end), _instant(now)
    if now < start:
        return 0
    if now >= end:
        return 100
    # timedelta / timedelta divides integer microseconds, so .5 boundaries stay exact.
    return round_half_away((100 * (now - start)) / (end - start))


def is_live(text: str, now: datetime) -> bool:
    start, end = parse_time_range(text, now)
    if start is None or end is None:
        return False
    return _instant(start) <= _instant(now) < _instant(end)


def is_completed(text: str, now: datetime) -> bool:
    _, end = parse_time_range(text, now)
    if end is None:
        return False
    return _instant(now) >= _instant(end)


def progress_percent(text: str, now: datetime) -> int:
    start, end = parse_time_range(text, now)
    if start is None or end is None:
        return 0
    return _progress(start, end, now)


def liveness(text: str, now: datetime) -> TaskLiveness:
    """All three liveness facts from a single parse."""
    start, end = parse_time_range(text, now)
    if start is None or end is None:
        return TaskLiveness(is_live=False, is_completed=False, progress_percent=0)
    at = _instant(now)
    return TaskLiveness(
        is_live=_instant(start) <= at < _instant(end),
        is_completed=at >= _instant(end),
        progress_percent=_progress(start, end, now),
    )


def split_range_text(text: str) -> tuple[str, str]:
    """
    Split "6:30 – 9:00 AM" into ("6:30", "9:00 AM") for storage as separate fields.

    No AM/PM inference happens here; each part keeps its own text.
    """
    cleaned = _DASHES_RE.sub("-", text or "").strip()
    parts = [p.strip() for p in cleaned.split("-")]
    if len(parts) != 2:
        raise InvalidTimeRangeFormat(f"Invalid time range: {text!r}")
    return parts[0], parts[1]
