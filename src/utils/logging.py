"""Structured JSON logging configuration.

Every record is rendered as one JSON object per line. Context passed with
``logger.info("...", extra={"word": "cat"})`` becomes top-level keys.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Attributes every LogRecord carries; anything else came from ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ('httpx', 'httpcore', 'uvicorn.access')


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.WARNING:
            payload["location"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not callable(value)
        )
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_structured_logging(level: str | None = None) -> None:
    """Install the JSON handler on the root logger and quiet chatty libraries."""
    json_handler = logging.StreamHandler()
    json_handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers = [json_handler]
    root.setLevel(level or LOG_LEVEL)

    for name in _QUIET_LOGGERS:
        noisy = logging.getLogger(name)
        noisy.handlers = [json_handler]
        noisy.propagate = False
        noisy.setLevel(logging.WARNING)
