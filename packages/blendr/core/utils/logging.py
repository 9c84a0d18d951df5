"""Logging setup for blendr.

Records go to stdout or to a file, either as plain text or as one JSON
object per line for log shippers.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``level``, ``message``, ``timestamp`` (UTC, ISO 8601) and
    ``context``. The context holds the record's origin, fields passed via
    ``extra=`` and, for exceptions, the error type, message and traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info and record.exc_info[0] is not None:
            error_type, error, _tb = record.exc_info
            context["error_type"] = error_type.__name__
            context["error_message"] = str(error)
            context["stack_trace"] = self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Replace the root logging setup.

    Safe to call repeatedly; earlier handlers are removed.

    Args:
        level: Level name, case-insensitive
        format_string: Text format; ignored when structured
        filename: Log file; stdout when None
        structured: Emit JSON lines instead of text
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
