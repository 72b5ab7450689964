"""Application logger: JSON lines to a file when debugging, discarded otherwise."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime

TRACE = 5

_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


def _level_name(levelno: int) -> str:
    if levelno >= logging.CRITICAL:
        return "fatal"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warning"
    if levelno >= logging.INFO:
        return "info"
    if levelno >= logging.DEBUG:
        return "debug"
    return "trace"


class _JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object with the logger's fixed fields."""

    def __init__(self, field_names) -> None:
        super().__init__()
        self._field_names = tuple(field_names)

    def format(self, record: logging.LogRecord) -> str:
        entry = {name: getattr(record, name, None) for name in self._field_names}
        entry["level"] = _level_name(record.levelno)
        entry["msg"] = record.getMessage()
        entry["time"] = (
            datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")
        )
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True, default=str)


def get_log_level() -> int:
    """Level named by LOG_LEVEL, or DEBUG if it is unset or unknown."""
    return _LEVELS.get(os.environ.get("LOG_LEVEL", "").lower(), logging.DEBUG)


def _development_logger(config_dir, formatter: logging.Formatter) -> logging.Logger:
    logger = logging.Logger("dockterm")
    logger.setLevel(get_log_level())
    try:
        handler = logging.FileHandler(
            os.path.join(config_dir, "development.log"), mode="a", encoding="utf-8"
        )
    except OSError:
        print("unable to log to file")
        sys.exit(1)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def _production_logger() -> logging.Logger:
    logger = logging.Logger("dockterm")
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.ERROR)
    return logger


def new_logger(debug, version, commit, build_date, config_dir) -> logging.LoggerAdapter:
    """Return a logger carrying the build details on every record.

    In debug mode, or when DEBUG=TRUE, records go to development.log in
    ``config_dir``; otherwise only errors are kept, and they are discarded.
    """
    fields = {
        "debug": debug,
        "version": version,
        "commit": commit,
        "buildDate": build_date,
    }
    formatter = _JsonFormatter(fields)
    if debug or os.environ.get("DEBUG") == "TRUE":
        logger = _development_logger(config_dir, formatter)
    else:
        logger = _production_logger()
    logger.propagate = False
    return logging.LoggerAdapter(logger, fields)