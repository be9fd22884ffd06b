# src/todo_list/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER_PREFIX = "todo_list."


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console filter. Own records pass (the handler level decides), captured
    warnings.warn() records pass at WARNING+, everything else needs ERROR+.
    """

    def __init__(self, prefix: str = APP_LOGGER_PREFIX) -> None:
        super().__init__()
        self._prefix = prefix

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(self._prefix):
            return True
        if record.name == "py.warnings":
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "todo.log"


def _build_handlers(log_file: Path, console_level: int, file_level: int) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_ConsoleNoiseFilter())

    # The file gets everything at file_level, unfiltered.
    file = logging.FileHandler(str(log_file), encoding="utf-8")
    file.setLevel(file_level)

    for handler in (console, file):
        handler.setFormatter(formatter)
    return [console, file]


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route all logging to stderr (filtered) and to <log_dir>/todo.log.

    Replaces whatever handlers the root logger had, so calling it twice does
    not duplicate output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.setLevel(min(console_level, file_level))
    for handler in _build_handlers(log_file, console_level, file_level):
        root.addHandler(handler)

    logging.captureWarnings(True)
    return log_file
