# src/timetable_companion/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "timetable.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console shares the terminal with the REPL prompt. Our own records pass,
    except the per-minute watcher which only shows WARNING+; everything else
    (py.warnings, libraries) needs ERROR+.
    """

    def __init__(self, quiet_prefix: str = "timetable_companion.watch.") -> None:
        super().__init__()
        self._quiet_prefix = quiet_prefix

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(self._quiet_prefix):
            return record.levelno >= logging.WARNING
        if name.startswith("timetable_companion."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/timetable",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """Filtered stderr handler plus a full log file in `log_dir`. Returns the log file path."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
