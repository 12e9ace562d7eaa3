# src/timetable_companion/watch/live_watcher.py

from __future__ import annotations

"""
Live-entry watcher.

A small polling loop that:
- resolves which timetable entry is live right now,
- announces changes ("Live now: ...") via an injected notifier port,
- announces the end of the previous entry when nothing new has started.

Rendering/transport belongs to the connector, not the watcher.
"""

import asyncio
import contextlib
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..core.ports import OutboundNotifier
from ..core.service import LiveEntry, TimetableService

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Announcement:
    key: tuple[str, int, str] | None
    text: str | None


def plan_announcement(
    previous: LiveEntry | None, current: LiveEntry | None
) -> Announcement:
    """
    Decide what (if anything) to announce for a transition previous -> current.

    Entries are identified by (day, index, time) so an edited time counts as new.
    """
    prev_key = _key(previous)
    cur_key = _key(current)

    if cur_key == prev_key:
        return Announcement(key=cur_key, text=None)

    if current is not None:
        return Announcement(
            key=cur_key,
            text=f"Live now: {current.entry.subject} ({current.entry.time})",
        )

    assert previous is not None
    return Announcement(key=None, text=f"Finished: {previous.entry.subject}")


def _key(live: LiveEntry | None) -> tuple[str, int, str] | None:
    if live is None:
        return None
    return live.day, live.index, live.entry.time


async def run_live_watcher(
        service: TimetableService,
        notifier: OutboundNotifier,
        *,
        interval_seconds: float = 60.0,
        now_fn: Callable[[], datetime] = datetime.now,
) -> None:
    """
    Simple polling watcher.

    Every interval_seconds:
    - ask the service for the live entry at now_fn()
    - compare with the last announced entry
    - send a notification on change

    A failed send is retried on the next tick (the previous entry is kept).
    To stop the watcher, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))
    previous: LiveEntry | None = None

    while True:
        try:
            current = service.get_live_entry(now_fn())
        except Exception:
            logger.exception("get_live_entry failed")
            await asyncio.sleep(sleep_s)
            continue

        announcement = plan_announcement(previous, current)
        if announcement.text is None:
            previous = current
        else:
            try:
                await notifier.send_text(text=announcement.text)
                logger.info("Announced: %s", announcement.text)
                previous = current
            except Exception:
                logger.exception("notifier send failed text=%r", announcement.text)

        await asyncio.sleep(sleep_s)


class LiveWatcherRunner:
    """
    Runs run_live_watcher() on a daemon thread with its own event loop,
    so the blocking console REPL can own the main thread.
    """

    def __init__(
        self,
        service: TimetableService,
        notifier: OutboundNotifier,
        *,
        interval_seconds: float = 60.0,
        now_fn: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._service = service
        self._notifier = notifier
        self._interval = interval_seconds
        self._now_fn = now_fn
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task[None] | None = None
        self._ready = threading.Event()
        self._thread = threading.Thread(target=self._run, name="live-watcher", daemon=True)

    def start(self) -> None:
        self._thread.start()
        self._ready.wait(timeout=5.0)
        logger.info("Live watcher started (interval=%ss).", self._interval)

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        self._loop = loop
        asyncio.set_event_loop(loop)
        self._task = loop.create_task(
            run_live_watcher(
                self._service,
                self._notifier,
                interval_seconds=self._interval,
                now_fn=self._now_fn,
            )
        )
        self._ready.set()
        try:
            loop.run_until_complete(self._task)
        except asyncio.CancelledError:
            pass
        finally:
            loop.close()

    def stop(self) -> None:
        loop, task = self._loop, self._task
        if loop is None or task is None or loop.is_closed():
            return
        # Loop may close between the check and the call.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(task.cancel)

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout=timeout)
