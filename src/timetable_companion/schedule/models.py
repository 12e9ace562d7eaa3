# src/timetable_companion/schedule/models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

DAYS: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_DAY_LOOKUP: dict[str, str] = {}
for _d in DAYS:
    _DAY_LOOKUP[_d.lower()] = _d
    _DAY_LOOKUP[_d[:3].lower()] = _d


class UnknownDay(KeyError):
    """Raised for day names outside Sunday..Saturday."""


class TaskType(StrEnum):
    """
    Subject category of a timetable entry.

    Stored as plain strings in the timetable file; unknown values are kept
    verbatim on the entry and only mapped to BREAK when a TaskType is needed.
    """

    MATHS = "maths"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    ENGLISH = "english"
    COMPUTER = "computer"
    BENGALI = "bengali"
    BREAK = "break"
    TRAVEL = "travel"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskType:
        if not raw:
            return cls.BREAK
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.BREAK


TASK_TYPE_LABELS: dict[TaskType, str] = {
    TaskType.MATHS: "Maths",
    TaskType.PHYSICS: "Physics",
    TaskType.CHEMISTRY: "Chemistry",
    TaskType.ENGLISH: "English",
    TaskType.COMPUTER: "Computer",
    TaskType.BENGALI: "Bengali",
    TaskType.BREAK: "Break",
    TaskType.TRAVEL: "Travel",
}


@dataclass(frozen=True, slots=True)
class TimetableEntry:
    time: str
    subject: str
    details: str = ""
    type: str = TaskType.BREAK.value

    @property
    def task_type(self) -> TaskType:
        return TaskType.from_raw(self.type)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> TimetableEntry:
        return cls(
            time=str(raw["time"]),
            subject=str(raw["subject"]),
            details=str(raw.get("details", "")),
            type=str(raw.get("type", TaskType.BREAK.value)),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


Timetable = dict[str, list[TimetableEntry]]


@dataclass(frozen=True, slots=True)
class Lesson:
    """One timetable entry split into separate start/end fields, as stored by the backend."""

    id: str
    schedule_id: str
    day_of_week: str
    start_time: str
    end_time: str
    subject: str
    details: str
    type: str
    order: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def normalize_day(name: str) -> str:
    """'mon', 'MONDAY', 'Monday' -> 'Monday'."""
    key = (name or "").strip().lower()
    try:
        return _DAY_LOOKUP[key]
    except KeyError:
        raise UnknownDay(name) from None


def weekday_name(when: date | datetime) -> str:
    # date.weekday(): Monday == 0; DAYS starts on Sunday.
    return DAYS[(when.weekday() + 1) % 7]
