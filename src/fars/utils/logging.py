"""Logging setup for the ``fars`` CLI: plain text or single-line JSON."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

# Attributes every LogRecord carries; anything else arrived via ``extra=``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed with ``extra=`` (year, state, path ...) are merged into
    the payload so skipped years and written reports can be filtered on.
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
            if key not in _RECORD_ATTRS:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach one stream handler to the ``fars`` package logger.

    Calling again replaces the handler installed by a previous call, so
    repeated CLI invocations in one process do not duplicate output.

    Args:
        level: Level name, e.g. ``'INFO'``.
        json_format: Use ``JsonFormatter`` instead of the text format.
        stream: Destination; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("fars")
    for old in [h for h in logger.handlers if getattr(h, "_fars_cli", False)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._fars_cli = True
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return handler
