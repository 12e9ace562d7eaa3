# src/timetable_companion/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from .ports import OutboundNotifier, TimetableRepo
from .service import TimetableService


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: Any

    store: TimetableRepo
    service: TimetableService
    notifier: OutboundNotifier

    # Injected clock; tests pin it to a fixed datetime.
    clock: Callable[[], datetime] = datetime.now

    lock: threading.RLock = field(default_factory=threading.RLock)

    def now(self) -> datetime:
        return self.clock()
