# src/timetable_companion/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from pathlib import Path
from typing import cast

from ..core.requests import ExportLessons, GetDay, GetDayStats, GetLiveEntry, ImportDays, ResolveTime, UpdateEntry
from ..core.service import dispatch
from ..core.state import AppState
from ..schedule.day_view import describe_entry, week_progress
from ..schedule.models import TASK_TYPE_LABELS, TaskType, TimetableEntry, UnknownDay, normalize_day, weekday_name
from ..schedule.quotes import QuoteKind, random_quote
from ..schedule.time_range import InvalidTimeRangeFormat
from ..schedule.validation import InvalidTimetable

CommandEmitter = Callable[[str], None]
CommandHandler4 = Callable[[AppState, list[str], str | None, str | None], str]
CommandHandler5 = Callable[
    [AppState, list[str], str | None, str | None, CommandEmitter | None], str
]
CommandHandler = CommandHandler4 | CommandHandler5

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash commands for the console: name/alias -> handler, plus help text."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        self._help[key] = help_text
        self._aliases[key] = [a.lower() for a in aliases or []]
        for word in (key, *self._aliases[key]):
            self._handlers[word] = handler

    @staticmethod
    def _wants_emitter(handler: CommandHandler) -> bool:
        try:
            return len(inspect.signature(handler).parameters) >= 5
        except (TypeError, ValueError):
            return True

    def handle(
        self,
        state: AppState,
        line: str,
        user_id: str | None = None,
        room_id: str | None = None,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """Run "/name args..."; None when `line` is not a slash command."""
        if not line.startswith("/"):
            return None

        name, *args = line[1:].split() or [""]
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name.lower())
        if handler is None:
            return f"Unknown command: /{name.lower()}. Use /help to list available commands."

        if self._wants_emitter(handler):
            return cast(CommandHandler5, handler)(state, args, user_id, room_id, emit)
        return cast(CommandHandler4, handler)(state, args, user_id, room_id)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            aliases = "".join(f", /{a}" for a in self._aliases[name])
            lines.append(f"  /{name}{aliases} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _render_day(state: AppState, day: str) -> str:
    now = state.now()
    entries = dispatch(state.service, GetDay(day=day))
    if not entries:
        return f"No tasks scheduled for {day}."
    lines = [f"{day}:"]
    # Liveness only makes sense for the current weekday.
    is_today = day == weekday_name(now)
    for i, entry in enumerate(entries):
        if is_today:
            lines.append(f"  {i:>2}. {describe_entry(entry, now)}")
        else:
            lines.append(f"  {i:>2}. {entry.time:<18} {entry.subject}")
    return "\n".join(lines)


def cmd_help(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    return registry.build_help()


def cmd_today(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    return _render_day(state, weekday_name(state.now()))


def cmd_day(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    """
    /day monday  -> show that day's entries
    """
    if not args:
        return "Usage: /day <Sunday..Saturday>"
    try:
        day = normalize_day(args[0])
    except UnknownDay:
        return f"Unknown day: {args[0]}"
    return _render_day(state, day)


def cmd_live(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    live = dispatch(state.service, GetLiveEntry(now=state.now()))
    if live is None:
        return "Nothing live right now."
    return (
        f"Live now: {live.entry.subject}\n"
        f"  {live.entry.time} - {live.liveness.progress_percent}% done"
    )


def cmd_stats(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    """
    /stats        -> progress for today
    /stats friday -> completed counts for Friday, evaluated against the current time
    """
    now = state.now()
    try:
        day = normalize_day(args[0]) if args else weekday_name(now)
    except UnknownDay:
        return f"Unknown day: {args[0]}"

    stats = dispatch(state.service, GetDayStats(day=day, now=now))
    lines = [
        f"{day} progress: {stats.completed}/{stats.total} ({stats.percentage}%)",
    ]
    for raw_type, count in sorted(stats.by_type.items()):
        label = TASK_TYPE_LABELS.get(TaskType.from_raw(raw_type), raw_type)
        lines.append(f"  {label}: {count}")
    return "\n".join(lines)


def cmd_week(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    return f"Week progress: {week_progress(state.now())}%"


def cmd_resolve(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    """
    /resolve 11:30 - 1:30 PM  -> show how a time string is interpreted today
    """
    if not args:
        return "Usage: /resolve <time text>, e.g. /resolve 2:00 - 4:30 PM"
    text = " ".join(args)
    res = dispatch(state.service, ResolveTime(text=text, now=state.now()))
    start, end = res.resolved
    if start is None or end is None:
        return f"{text!r}: no concrete start/end (open-ended or unrecognized)."
    lv = res.liveness
    return (
        f"{text!r}: {start:%H:%M} -> {end:%H:%M}\n"
        f"  live={lv.is_live} completed={lv.is_completed} progress={lv.progress_percent}%"
    )


def cmd_set(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /set <day> <index> <time> | <subject> [| <type>]

    Replaces entry <index> (or appends when index == number of entries).
    """
    usage = "Usage: /set <day> <index> <time> | <subject> [| <type>]"
    if len(args) < 3:
        return usage
    try:
        day = normalize_day(args[0])
        index = int(args[1])
    except UnknownDay:
        return f"Unknown day: {args[0]}"
    except ValueError:
        return usage

    fields = [f.strip() for f in " ".join(args[2:]).split("|")]
    if len(fields) < 2 or not fields[0] or not fields[1]:
        return usage
    type_ = TaskType.from_raw(fields[2]).value if len(fields) > 2 and fields[2] else TaskType.BREAK.value
    entry = TimetableEntry(time=fields[0], subject=fields[1], details="", type=type_)

    try:
        dispatch(state.service, UpdateEntry(day=day, index=index, entry=entry))
    except IndexError as e:
        return str(e)

    logger.debug("Entry updated via /set (user_id=%s room_id=%s)", user_id, room_id)
    return f"Saved {day}[{index}]: {entry.time} {entry.subject}"


def cmd_export(
    state: AppState,
    args: list[str],
    user_id: str | None,
    room_id: str | None,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /export [path] -> write Lesson rows (start/end split) as JSON
    """
    path = Path(args[0]).expanduser() if args else None
    if emit:
        emit("[EXPORT] Splitting timetable into lessons...")
    try:
        count = dispatch(state.service, ExportLessons(path=path))
    except InvalidTimeRangeFormat as e:
        return f"Export failed: {e}"
    target = path or state.settings.lessons_export_path
    return f"Exported {count} lessons to {target}"


def cmd_import(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    """
    /import week.json -> replace the days listed in that file
    """
    if not args:
        return "Usage: /import <path to JSON of day -> entries>"
    path = Path(args[0]).expanduser()
    try:
        days = dispatch(state.service, ImportDays(path=path))
    except FileNotFoundError:
        return f"No such file: {path}"
    except InvalidTimetable as e:
        return f"Import failed: {e}"
    if not days:
        return f"{path} lists no days; nothing changed."
    return f"Replaced {', '.join(days)} from {path}"


def cmd_quote(state: AppState, args: list[str], user_id: str | None, room_id: str | None) -> str:
    kind = None
    if args:
        try:
            kind = QuoteKind(args[0].lower())
        except ValueError:
            return "Usage: /quote [motivation|roast]"
    quote = random_quote(kind)
    return f"{quote.bengali}\n  ({quote.translation})"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("today", cmd_today, help_text="Show today's timetable with live status.")
registry.register("day", cmd_day, help_text="Show a day's timetable: /day monday.")
registry.register("live", cmd_live, help_text="Show the entry that is live right now.", aliases=["now"])
registry.register("stats", cmd_stats, help_text="Completed/total for today or /stats <day>.")
registry.register("week", cmd_week, help_text="How much of the week has elapsed.")
registry.register("resolve", cmd_resolve, help_text="Interpret a time string: /resolve 11:30 - 1:30 PM.")
registry.register("set", cmd_set, help_text="Edit an entry: /set <day> <index> <time> | <subject> [| <type>].")
registry.register("export", cmd_export, help_text="Export lessons JSON: /export [path].")
registry.register("import", cmd_import, help_text="Replace days from a JSON file: /import <path>.")
registry.register("quote", cmd_quote, help_text="A Bengali pep talk or roast: /quote [motivation|roast].")
