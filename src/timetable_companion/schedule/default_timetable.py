# src/timetable_companion/schedule/default_timetable.py

"""Bundled weekly study timetable used when no timetable file exists yet."""

from __future__ import annotations

from .models import Timetable, TimetableEntry


def _entry(time: str, subject: str, type_: str) -> TimetableEntry:
    return TimetableEntry(time=time, subject=subject, details="", type=type_)


_DEFAULT: Timetable = {
    "Sunday": [
        _entry("6:30 – 9:00 AM", "📐 Maths Tuition", "maths"),
        _entry("9:15 – 9:30 AM", "🍽️ Breakfast + Light Phone Check", "break"),
        _entry("9:30 – 11:30 AM", "📐 Math Problem Solving", "maths"),
        _entry("11:30 – 12:00 PM", "📱 Mobile Break / Stretch", "break"),
        _entry("12:00 – 1:30 PM", "📝 English Revision", "english"),
        _entry("1:30 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 4:00 PM", "📘 Physics Self-Study", "physics"),
        _entry("4:00 – 4:30 PM", "📱 Short Mobile Break / Snack", "break"),
        _entry("5:00 – 6:30 PM", "📘 Physics Tuition", "physics"),
        _entry("7:00 – 8:30 PM", "🧪 Chemistry Self Study", "chemistry"),
        _entry("8:30 – 9:00 PM", "🍽️ Dinner", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
        _entry("11:00 – 11:10 PM", "📱 Wind Down / Light Phone Use", "break"),
    ],
    "Monday": [
        _entry("7:00 – 9:00 AM", "📘 Physics Self-Study", "physics"),
        _entry("9:00 – 9:30 AM", "🍽️ Breakfast + Light Phone Check", "break"),
        _entry("9:30 – 11:30 AM", "🧪 Chemistry Revision / Notes", "chemistry"),
        _entry("11:30 – 12:00 PM", "📱 Mobile Break / Stretch", "break"),
        _entry("12:00 – 1:30 PM", "💻 Computer Self Study", "computer"),
        _entry("1:30 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 4:00 PM", "📐 Math Practice / Revision", "maths"),
        _entry("4:00 – 5:00 PM", "📱 Snack / Short Phone Check", "break"),
        _entry("5:00 – 5:30 PM", "🎸 Guitar?", "break"),
        _entry("5:00 – 8:00 PM", "📖 Bengali Self Study", "bengali"),
        _entry("8:30 – 9:00 PM", "🍽️ Dinner", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
        _entry("11:00 – 11:10 PM", "📱 Wind Down / Light Phone Use", "break"),
    ],
    "Tuesday": [
        _entry("7:00 – 8:30 AM", "🧪 Chemistry Tuition", "chemistry"),
        _entry("8:50 – 9:30 AM", "🍽️ Breakfast + Short Phone Check", "break"),
        _entry("9:30 – 11:30 AM", "📐 Math Tuition", "maths"),
        _entry("11:30 – 1:30 PM", "📐 Math Problem Solving", "maths"),
        _entry("1:30 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 4:30 PM", "🧪 Chemistry Practice", "chemistry"),
        _entry("4:30 – 5:00 PM", "📱 Snack / Light Phone Use", "break"),
        _entry("5:00 – 7:30 PM", "📘 Physics Self Study", "physics"),
        _entry("7:30 – 9:00 PM", "🍽️ Dinner + Relax", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
    ],
    "Wednesday": [
        _entry("7:00 – 9:00 AM", "📘 Physics Self Study", "physics"),
        _entry("9:00 – 9:30 AM", "🍽️ Breakfast + Light Phone Check", "break"),
        _entry("9:30 – 11:30 AM", "📐 Math Practice", "maths"),
        _entry("11:30 – 1:30 PM", "🧪 Chemistry Revision", "chemistry"),
        _entry("1:30 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 5:30 PM", "💻 Computer Revision", "computer"),
        _entry("5:30 – 6:30 PM", "📱 Snack / Mobile Break", "break"),
        _entry("7:00 – 8:30 PM", "💻 Computer Tuition", "computer"),
        _entry("8:30 – 9:00 PM", "🍽️ Travel / Snack", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
    ],
    "Thursday": [
        _entry("7:00 – 9:30 AM", "🧪 Chemistry Self Study", "chemistry"),
        _entry("9:30 – 11:30 AM", "📐 Math Tuition", "maths"),
        _entry("11:30 – 1:00 PM", "📐 Math Practice / Notes", "maths"),
        _entry("1:00 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:30 – 5:30 PM", "📘 Physics Self Study", "physics"),
        _entry("5:30 – 6:30 PM", "📱 Snack / Short Phone Check", "break"),
        _entry("6:30 – 8:00 PM", "📘 Physics Tuition", "physics"),
        _entry("8:00 – 8:30 PM", "🍽️ Travel / Snack", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
    ],
    "Friday": [
        _entry("7:00 – 9:30 AM", "📘 Physics Self Study", "physics"),
        _entry("9:30 – 10:00 AM", "🍽️ Breakfast + Light Phone Check", "break"),
        _entry("10:00 – 1:00 PM", "📐 Math Practice / Problem Sets", "maths"),
        _entry("1:00 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 4:30 PM", "🧪 Chemistry Revision", "chemistry"),
        _entry("4:30 – 5:00 PM", "📱 Snack / Mobile Break", "break"),
        _entry("5:00 – 6:30 PM", "📝 English Tuition", "english"),
        _entry("7:00 – 8:30 PM", "💻 Computer Tuition", "computer"),
        _entry("8:30 – 9:00 PM", "🍽️ Travel / Snack", "break"),
        _entry("9:00 – 11:00 PM", "📐 Math Practice / Revision", "maths"),
    ],
    "Saturday": [
        _entry("7:00 – 8:30 AM", "🧪 Chemistry Tuition", "chemistry"),
        _entry("8:30 – 8:50 AM", "🚗 Travel", "travel"),
        _entry("8:50 – 9:30 AM", "🍽️ Breakfast + Light Phone Check", "break"),
        _entry("9:30 – 11:30 AM", "📐 Math Tuition", "maths"),
        _entry("11:30 – 1:30 PM", "📐 Math Self Study", "maths"),
        _entry("1:30 – 2:00 PM", "🍽️ Lunch", "break"),
        _entry("2:00 – 2:30 PM", "📱 Short Phone Check", "break"),
        _entry("2:30 – 4:30 PM", "📐 Math Tuition", "maths"),
        _entry("4:30 – 5:00 PM", "🚗 Travel / Short Phone Check", "travel"),
        _entry("5:00 – 8:00 PM", "📖 Bengali Revision", "bengali"),
        _entry("8:00 – 10:00 PM", "📖 Bengali Tuition", "bengali"),
        _entry("10:10 – 11:00 PM", "📱 Wind Down / Light Phone Use", "break"),
    ],
}


def default_timetable() -> Timetable:
    """Fresh copy; callers may mutate the day lists."""
    return {day: list(entries) for day, entries in _DEFAULT.items()}
