# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskboard.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    "name, level, shown",
    [
        ("taskboard.web.app", logging.DEBUG, True),
        ("taskboard", logging.INFO, True),
        ("uvicorn.access", logging.INFO, True),
        ("taskboardx", logging.INFO, False),
        ("httpx", logging.INFO, False),
        ("httpx", logging.WARNING, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
    ],
)
def test_console_filter(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file_and_replaces_handlers(
    tmp_path: Path, restore_root_logging
) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    setup_logging(log_dir=tmp_path / "logs")

    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert len(logging.getLogger().handlers) == 2

    logging.getLogger("taskboard.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in log_file.read_text("utf-8")
