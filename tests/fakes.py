# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from timetable_companion.core.ports import OutboundNotifier


@dataclass(slots=True)
class FakeNotifier(OutboundNotifier):
    """
    Fake OutboundNotifier used by watcher tests.

    - Captures sent texts for assertions
    - Can be told to fail the next N sends
    """

    sent: list[str] = field(default_factory=list)
    fail_next: int = 0

    async def send_text(self, *, text: str) -> None:
        if self.fail_next > 0:
            self.fail_next -= 1
            raise RuntimeError("send failed")
        self.sent.append(text)


class FakeClock:
    """Settable clock; call it like datetime.now."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now
