"""Logging configuration for the repository manager.

Provides a JSON formatted logger named ``ritrepo``. Modules inside the package
log through ``logging.getLogger(__name__)`` and propagate into it.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

LOG_NAME = "ritrepo"
LOG_FILE: Optional[Path] = None
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 3

# Attributes every LogRecord carries on this interpreter, plus the two the
# Formatter adds. Anything else on a record came in through ``extra=``.
RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formatter returning log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short description
        base: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in RESERVED_RECORD_ATTRS
        }
        if extras:
            base["extra"] = extras
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def get_logger(level: Optional[str] = None) -> logging.Logger:
    """Return the configured package logger.

    The first call installs a stderr handler at ``level`` (falling back to the
    configured ``RIT_LOG_LEVEL``) and a rotating file handler at DEBUG. Later
    calls return the same logger untouched.
    """
    logger = logging.getLogger(LOG_NAME)
    if logger.handlers:
        return logger

    from ritrepo.config.settings import settings

    logger.setLevel(logging.DEBUG)

    formatter = JsonFormatter()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level or settings.log_level)
    stream_handler.setFormatter(formatter)

    log_file = LOG_FILE or settings.resolved_log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
