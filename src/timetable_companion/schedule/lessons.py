# src/timetable_companion/schedule/lessons.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .models import DAYS, Lesson, Timetable
from .time_range import split_range_text

logger = logging.getLogger(__name__)


def lessons_from_timetable(timetable: Timetable, schedule_id: str) -> list[Lesson]:
    """
    Flatten a timetable into Lesson rows with separate start/end text.

    Raises InvalidTimeRangeFormat on the first entry whose time does not split
    into exactly two parts ("onwards" entries and single times included).
    """
    out: list[Lesson] = []
    for day in DAYS:
        for i, entry in enumerate(timetable.get(day, [])):
            start_time, end_time = split_range_text(entry.time)
            out.append(
                Lesson(
                    id=f"{schedule_id}-{day}-{i}",
                    schedule_id=schedule_id,
                    day_of_week=day,
                    start_time=start_time,
                    end_time=end_time,
                    subject=entry.subject,
                    details=entry.details or "",
                    type=entry.type,
                    order=i,
                )
            )
    return out


def export_lessons(lessons: list[Lesson], path: str | Path) -> int:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps([lesson.to_dict() for lesson in lessons], ensure_ascii=False, indent=2), "utf-8")
    os.replace(tmp, path)
    logger.info("Exported %d lessons to %s", len(lessons), path)
    return len(lessons)
