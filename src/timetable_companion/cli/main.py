# src/timetable_companion/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts:
- the live watcher in a background thread (optional),
- the console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import sys
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..schedule.validation import InvalidTimetable
from ..watch.live_watcher import LiveWatcherRunner

logger = logging.getLogger(__name__)


def install_signal_handlers(stop: threading.Event, *, console_enabled: bool) -> None:
    """
    SIGTERM always sets `stop`. SIGINT does too when running headless; with the
    console on, Ctrl+C keeps raising KeyboardInterrupt so input() is interrupted.
    """

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop.set()

    handlers = {
        signal.SIGTERM: _handle_signal,
        signal.SIGINT: signal.default_int_handler if console_enabled else _handle_signal,
    }
    for sig, handler in handlers.items():
        try:
            signal.signal(sig, handler)
        except (ValueError, OSError):
            logger.debug("Cannot install handler for %s", sig)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (%s)...", settings.app_name, settings.schedule_name)

    try:
        state = create_initial_state(settings=settings)
    except InvalidTimetable as e:
        logger.error("Cannot load timetable %s: %s", settings.timetable_path, e)
        sys.exit(2)

    watcher: LiveWatcherRunner | None = None
    if settings.watch_enabled:
        watcher = LiveWatcherRunner(
            state.service,
            state.notifier,
            interval_seconds=settings.watch_interval_seconds,
            now_fn=state.now,
        )
        watcher.start()

    stop_main = threading.Event()
    install_signal_handlers(stop_main, console_enabled=settings.console_enabled)

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Running live watcher only. Press Ctrl+C to stop.")
            stop_main.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        if watcher is not None:
            watcher.stop()
            watcher.join(timeout=10.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
