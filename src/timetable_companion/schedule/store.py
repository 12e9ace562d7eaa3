# src/timetable_companion/schedule/store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .default_timetable import default_timetable
from .models import DAYS, Timetable, TimetableEntry, normalize_day
from .validation import InvalidTimetable, dump_timetable, parse_timetable

logger = logging.getLogger(__name__)


class TimetableStore:
    """
    JSON-file timetable store.

    - load(): read the file, or start from the bundled default timetable if missing
    - every mutation writes the whole document back (tmp file + os.replace)

    Not thread-safe on its own; the service layer serializes writes.
    """

    def __init__(self, path: str | Path = "timetable.json") -> None:
        self._path = Path(path)
        self._timetable: Timetable = {day: [] for day in DAYS}

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Timetable:
        if not self._path.exists():
            self._timetable = default_timetable()
            logger.info("No timetable at %s; using bundled default.", self._path)
            return self._timetable

        try:
            raw = json.loads(self._path.read_text("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidTimetable(f"{self._path}: not valid UTF-8 JSON ({e})") from e

        self._timetable = parse_timetable(raw)
        total = sum(len(v) for v in self._timetable.values())
        logger.info("TimetableStore ready path=%s entries=%d", self._path, total)
        return self._timetable

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(dump_timetable(self._timetable), ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Saved timetable to %s", self._path)

    # ---- queries ----

    def timetable(self) -> Timetable:
        return self._timetable

    def get_day(self, day: str) -> list[TimetableEntry]:
        return list(self._timetable.get(normalize_day(day), []))

    # ---- mutations ----

    def update_entry(self, day: str, index: int, entry: TimetableEntry) -> None:
        key = normalize_day(day)
        entries = self._timetable.setdefault(key, [])
        if index == len(entries):
            entries.append(entry)
        elif 0 <= index < len(entries):
            entries[index] = entry
        else:
            raise IndexError(f"{key} has {len(entries)} entries; index {index} out of range")
        self.save()
        logger.info("Updated %s[%d] -> %s (%s)", key, index, entry.subject, entry.time)

    def replace_day(self, day: str, entries: list[TimetableEntry]) -> None:
        key = normalize_day(day)
        self._timetable[key] = list(entries)
        self.save()
        logger.info("Replaced %s with %d entries", key, len(entries))
