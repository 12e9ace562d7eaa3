"""
Schedule subsystem.

Components:
- time_range.py: time-string resolver + live/completed/progress facts
- models.py: data structures (TimetableEntry, Lesson, TaskType, day names)
- validation.py: shape checks for full and partial (import) timetable documents
- store.py: JSON-file timetable store
- day_view.py: per-day helpers (live entry, stats, week progress)
- lessons.py: timetable -> Lesson rows export
- quotes.py: Bengali motivation/roast quotes
"""
