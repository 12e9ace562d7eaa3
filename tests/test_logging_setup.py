# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from timetable_companion.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_levels() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("timetable_companion.schedule.store", logging.DEBUG))
    assert not f.filter(_record("timetable_companion.watch.live_watcher", logging.INFO))
    assert f.filter(_record("timetable_companion.watch.live_watcher", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_setup_logging_writes_log_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("timetable_companion.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "timetable.log"
    assert "hello file" in log_file.read_text("utf-8")
    assert len(logging.getLogger().handlers) == 2
