# src/taskboard/logging_setup.py

"""Process-wide logging for the taskboard server (stderr + data_dir/taskboard.log)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskboard.log"

_CONSOLE_PREFIXES = ("taskboard", "uvicorn")


def _own_logger(name: str) -> bool:
    return any(name == p or name.startswith(p + ".") for p in _CONSOLE_PREFIXES)


class _ConsoleNoiseFilter(logging.Filter):
    """Console sees app + uvicorn records; other libraries only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if _own_logger(record.name):
            return True
        if record.name == "py.warnings":
            return record.levelno >= logging.ERROR
        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    log_dir: str | Path = "data",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the console and file handlers on the root logger.

    Replaces any handlers already on root, so calling it twice does not
    duplicate output. uvicorn must be started with log_config=None to
    log through these handlers. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s %(name)s [%(threadName)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
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
