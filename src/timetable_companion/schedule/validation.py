# src/timetable_companion/schedule/validation.py

from __future__ import annotations

from typing import Any

from .models import DAYS, Timetable, TimetableEntry, UnknownDay, normalize_day

_ENTRY_FIELDS = ("time", "subject", "details", "type")


class InvalidTimetable(ValueError):
    """Raised when a timetable document does not have the expected shape."""


def validate_entry(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    return all(isinstance(raw.get(k), str) for k in _ENTRY_FIELDS)


def validate_timetable(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    for entries in raw.values():
        if not isinstance(entries, list):
            return False
        if not all(validate_entry(e) for e in entries):
            return False
    return True


def parse_timetable(raw: Any) -> Timetable:
    """
    Validate a decoded JSON document and convert it to a Timetable.

    Unknown day keys are rejected; days that are missing come back as empty lists.
    Raises InvalidTimetable naming the first offending day/index.
    """
    if not isinstance(raw, dict):
        raise InvalidTimetable("timetable must be an object of day -> entries")

    out: Timetable = {day: [] for day in DAYS}
    for day, entries in raw.items():
        if day not in out:
            raise InvalidTimetable(f"unknown day {day!r}")
        if not isinstance(entries, list):
            raise InvalidTimetable(f"{day}: entries must be a list")
        for i, e in enumerate(entries):
            if not validate_entry(e):
                raise InvalidTimetable(f"{day}[{i}]: entry needs string fields {', '.join(_ENTRY_FIELDS)}")
            out[day].append(TimetableEntry.from_dict(e))
    return out


def parse_day_sections(raw: Any) -> dict[str, list[TimetableEntry]]:
    """
    Parse a partial document ({"mon": [...], "Friday": [...]}) for importing.

    Day keys may be short or any case. Only the days present are returned.
    """
    if not validate_timetable(raw):
        raise InvalidTimetable("import must be an object of day -> list of entries with string fields")
    out: dict[str, list[TimetableEntry]] = {}
    for name, entries in raw.items():
        try:
            day = normalize_day(name)
        except UnknownDay:
            raise InvalidTimetable(f"unknown day {name!r}") from None
        out[day] = [TimetableEntry.from_dict(e) for e in entries]
    return out


def dump_timetable(timetable: Timetable) -> dict[str, list[dict[str, str]]]:
    return {day: [e.to_dict() for e in timetable.get(day, [])] for day in DAYS}
