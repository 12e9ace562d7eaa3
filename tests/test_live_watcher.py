# tests/test_live_watcher.py

from __future__ import annotations

import asyncio
import time

import pytest

from timetable_companion.core.service import LiveEntry, TimetableService
from timetable_companion.schedule.models import TimetableEntry
from timetable_companion.schedule.time_range import TaskLiveness
from timetable_companion.watch.live_watcher import LiveWatcherRunner, plan_announcement, run_live_watcher

from .conftest import MONDAY_3PM
from .fakes import FakeClock, FakeNotifier


def _live(index: int, subject: str, time_text: str = "2:00 – 4:00 PM") -> LiveEntry:
    return LiveEntry(
        day="Monday",
        index=index,
        entry=TimetableEntry(time=time_text, subject=subject),
        liveness=TaskLiveness(is_live=True, is_completed=False, progress_percent=10),
    )


def test_plan_announcement_transitions() -> None:
    a = _live(1, "Maths")
    b = _live(2, "Physics", "4:00 – 5:00 PM")

    assert plan_announcement(None, None).text is None
    assert plan_announcement(None, a).text == "Live now: Maths (2:00 – 4:00 PM)"
    assert plan_announcement(a, a).text is None
    assert plan_announcement(a, b).text == "Live now: Physics (4:00 – 5:00 PM)"
    assert plan_announcement(b, None).text == "Finished: Physics"


def test_plan_announcement_treats_edited_time_as_new() -> None:
    before = _live(1, "Maths", "2:00 – 4:00 PM")
    after = _live(1, "Maths", "2:30 – 4:00 PM")
    assert plan_announcement(before, after).text == "Live now: Maths (2:30 – 4:00 PM)"


async def _run_for(coro, seconds: float) -> None:
    runner = asyncio.create_task(coro)
    await asyncio.sleep(seconds)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner


@pytest.mark.asyncio
async def test_watcher_announces_live_entry_once(service: TimetableService) -> None:
    notifier = FakeNotifier()
    clock = FakeClock(MONDAY_3PM)

    await _run_for(
        run_live_watcher(service, notifier, interval_seconds=0.01, now_fn=clock),
        0.08,
    )

    assert notifier.sent == ["Live now: 📐 Math Practice / Revision (2:00 – 4:00 PM)"]


@pytest.mark.asyncio
async def test_watcher_announces_finish(service: TimetableService) -> None:
    notifier = FakeNotifier()
    # 4:30 PM Monday: "4:00 – 5:00 PM Snack" is live; at 8:15 PM nothing is.
    clock = FakeClock(MONDAY_3PM.replace(hour=16, minute=30))

    runner = asyncio.create_task(
        run_live_watcher(service, notifier, interval_seconds=0.01, now_fn=clock)
    )
    await asyncio.sleep(0.05)
    clock.now = MONDAY_3PM.replace(hour=20, minute=15)
    await asyncio.sleep(0.05)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert len(notifier.sent) == 2
    assert notifier.sent[0].startswith("Live now: ")
    assert notifier.sent[1].startswith("Finished: ")


@pytest.mark.asyncio
async def test_watcher_retries_failed_send(service: TimetableService) -> None:
    notifier = FakeNotifier(fail_next=2)
    clock = FakeClock(MONDAY_3PM)

    await _run_for(
        run_live_watcher(service, notifier, interval_seconds=0.01, now_fn=clock),
        0.1,
    )

    assert notifier.sent == ["Live now: 📐 Math Practice / Revision (2:00 – 4:00 PM)"]


def test_runner_thread_starts_and_stops(service: TimetableService) -> None:
    notifier = FakeNotifier()
    runner = LiveWatcherRunner(
        service,
        notifier,
        interval_seconds=0.01,
        now_fn=FakeClock(MONDAY_3PM),
    )
    runner.start()

    deadline = time.monotonic() + 2.0
    while not notifier.sent and time.monotonic() < deadline:
        time.sleep(0.01)

    runner.stop()
    runner.join(timeout=2.0)

    assert notifier.sent
