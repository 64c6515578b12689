"""Centralized logging setup with an optional JSON formatter."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

# Attributes every LogRecord carries; anything else arrived via ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}

_TEXT_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload, so per-year
    warnings carry their ``year`` and ``reason`` as queryable fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single stream handler to the ``fars`` package logger.

    Repeated calls replace the handler installed by the previous call
    instead of stacking duplicates.

    Args:
        level: Logging level name (``'DEBUG'``, ``'INFO'``, ...).
        json_output: Use ``JsonFormatter`` instead of plain text.
        stream: Destination stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(_TEXT_FORMAT))
    handler._fars_handler = True
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return handler
