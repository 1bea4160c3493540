"""Structured JSON logging for jira-tally.

Each search appends one JSONL record to .jira-tally/jira-tally.log (rotated at
5MB, 3 backups). Records carry the CLI command plus the search fields passed
as ``extra={"command": ..., "search": {...}}``, flattened to top-level keys.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOG_FILENAME = "jira-tally.log"
LOGGER_NAME = "jira_tally"
SEARCH_KEYS = ("query", "template", "max_results", "returned")

_setup_lock = threading.Lock()
_MAX_BYTES = 5 * 1024 * 1024  # 5MB
_BACKUP_COUNT = 3


class SearchRecordFormatter(logging.Formatter):
    """One JSON object per line; search fields are lifted out of ``record.search``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        command = getattr(record, "command", None)
        if command:
            entry["command"] = command
        search = getattr(record, "search", None) or {}
        for key in SEARCH_KEYS:
            if search.get(key) is not None:
                entry[key] = search[key]
        if hasattr(record, "duration_ms"):
            entry["duration_ms"] = record.duration_ms
        if hasattr(record, "error"):
            entry["error"] = record.error
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = f"{type(record.exc_info[1]).__name__}: {record.exc_info[1]}"
        return json.dumps(entry, default=str)


def log_path(config_dir: Path) -> Path:
    return config_dir / LOG_FILENAME


def setup_logging(config_dir: Path, level: int | str = logging.INFO) -> logging.Logger:
    """Send the package's log records to ``<config_dir>/jira-tally.log``.

    Repeated calls for the same directory only update the level; a different
    directory swaps the file handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    target = os.path.abspath(str(log_path(config_dir)))

    with _setup_lock:
        logger.setLevel(level)
        for h in logger.handlers[:]:
            if not isinstance(h, RotatingFileHandler):
                continue
            if h.baseFilename == target:
                return logger
            logger.removeHandler(h)
            h.close()

        handler = RotatingFileHandler(target, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT)
        handler.setFormatter(SearchRecordFormatter())
        logger.addHandler(handler)
    return logger
