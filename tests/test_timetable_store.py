# tests/test_timetable_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from timetable_companion.schedule.models import DAYS, TaskType, TimetableEntry, UnknownDay, normalize_day
from timetable_companion.schedule.store import TimetableStore
from timetable_companion.schedule.validation import (
    InvalidTimetable,
    parse_timetable,
    validate_entry,
    validate_timetable,
)


def test_missing_file_loads_default_timetable(tmp_path: Path) -> None:
    store = TimetableStore(tmp_path / "timetable.json")
    tt = store.load()
    assert set(tt) == set(DAYS)
    assert tt["Sunday"][0].time == "6:30 – 9:00 AM"
    assert not (tmp_path / "timetable.json").exists()


def test_update_entry_persists_and_reloads(tmp_path: Path) -> None:
    path = tmp_path / "timetable.json"
    store = TimetableStore(path)
    store.load()

    entry = TimetableEntry(time="6:00 – 7:00 AM", subject="Morning run", details="", type="break")
    store.update_entry("sun", 0, entry)

    raw = json.loads(path.read_text("utf-8"))
    assert raw["Sunday"][0]["subject"] == "Morning run"

    reloaded = TimetableStore(path)
    reloaded.load()
    assert reloaded.get_day("Sunday")[0] == entry
    assert len(reloaded.get_day("Sunday")) == len(store.get_day("Sunday"))


def test_update_entry_appends_at_end_and_rejects_gaps(tmp_path: Path) -> None:
    store = TimetableStore(tmp_path / "timetable.json")
    store.load()
    n = len(store.get_day("Friday"))

    extra = TimetableEntry(time="11:00 – 11:30 PM", subject="Journal", type="break")
    store.update_entry("Friday", n, extra)
    assert store.get_day("Friday")[-1] == extra

    with pytest.raises(IndexError):
        store.update_entry("Friday", n + 5, extra)
    with pytest.raises(IndexError):
        store.update_entry("Friday", -1, extra)


def test_replace_day(tmp_path: Path) -> None:
    store = TimetableStore(tmp_path / "timetable.json")
    store.load()
    store.replace_day("saturday", [TimetableEntry(time="10:00 AM", subject="Rest")])
    assert [e.subject for e in store.get_day("Saturday")] == ["Rest"]


def test_get_day_returns_copy(tmp_path: Path) -> None:
    store = TimetableStore(tmp_path / "timetable.json")
    store.load()
    day = store.get_day("Monday")
    day.clear()
    assert store.get_day("Monday")


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "timetable.json"
    path.write_text("{not json", "utf-8")
    with pytest.raises(InvalidTimetable):
        TimetableStore(path).load()


def test_undecodable_bytes_raise_invalid_timetable(tmp_path: Path) -> None:
    path = tmp_path / "timetable.json"
    path.write_bytes(b'{"Monday": [{"time": "\xff\xfe", "subject": "x", "details": "", "type": "break"}]}')
    with pytest.raises(InvalidTimetable, match="UTF-8"):
        TimetableStore(path).load()


def test_invalid_entry_names_day_and_index(tmp_path: Path) -> None:
    path = tmp_path / "timetable.json"
    path.write_text(
        json.dumps({"Monday": [{"time": "9:00 AM", "subject": "x", "details": "", "type": "maths"}, {"time": 9}]}),
        "utf-8",
    )
    with pytest.raises(InvalidTimetable, match=r"Monday\[1\]"):
        TimetableStore(path).load()


def test_validate_entry_and_timetable() -> None:
    good = {"time": "9:00 AM", "subject": "Maths", "details": "", "type": "maths"}
    assert validate_entry(good)
    assert not validate_entry({**good, "details": None})
    assert not validate_entry("9:00 AM")
    assert validate_timetable({"Monday": [good], "Tuesday": []})
    assert not validate_timetable({"Monday": good})
    assert not validate_timetable([good])


def test_parse_timetable_rejects_unknown_day_and_fills_missing() -> None:
    with pytest.raises(InvalidTimetable, match="unknown day"):
        parse_timetable({"Funday": []})
    tt = parse_timetable({"Monday": []})
    assert set(tt) == set(DAYS)


def test_normalize_day() -> None:
    assert normalize_day("MON") == "Monday"
    assert normalize_day(" thursday ") == "Thursday"
    with pytest.raises(UnknownDay):
        normalize_day("someday")


def test_task_type_from_raw() -> None:
    assert TaskType.from_raw("Physics") is TaskType.PHYSICS
    assert TaskType.from_raw("travel") is TaskType.TRAVEL
    assert TaskType.from_raw("gaming") is TaskType.BREAK
    assert TaskType.from_raw(None) is TaskType.BREAK
    # Unknown raw types stay verbatim on the entry.
    assert TimetableEntry(time="", subject="", type="gaming").type == "gaming"
