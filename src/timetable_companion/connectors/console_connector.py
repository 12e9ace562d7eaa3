# src/timetable_companion/connectors/console_connector.py

from __future__ import annotations

import logging
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


class ConsoleNotifier:
    """OutboundNotifier that prints watcher announcements to stdout."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    async def send_text(self, *, text: str) -> None:
        # Called from the watcher thread while the REPL waits on input().
        with self._lock:
            print()
            _print_ts(f"[LIVE] {text}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands, /today for today's timetable, /exit to quit.\n")

    def emit(text: str) -> None:
        # Immediate user-visible feedback for longer operations (e.g., export)
        _print_ts(text)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            _print_ts("Commands start with '/'. Try /help.")
            continue

        try:
            with state.lock:
                response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            _print_ts(response)

    logger.info("Console connector finished.")
