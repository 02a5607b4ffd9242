"""JSON log formatting and one-call logging setup for the ``fars`` package."""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in via ``extra=``
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed through ``extra=`` (``year``, ``state``, ``path`` ...)
    are merged into the payload next to the standard keys.
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
            if key not in _RESERVED:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    json_output: bool = False,
    level: int = logging.INFO,
    stream: Optional[Any] = None,
) -> logging.Handler:
    """Attach a single stream handler to the ``fars`` package logger.

    Calling it again replaces the previous handler, so the CLI can be
    invoked repeatedly in one process (tests) without duplicate lines.

    Args:
        json_output: Use ``JsonFormatter`` instead of plain text.
        level: Logging level for the ``fars`` logger.
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    pkg_logger = logging.getLogger("fars")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_fars_handler", False):
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        JsonFormatter() if json_output else logging.Formatter(_TEXT_FORMAT)
    )
    handler._fars_handler = True
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return handler
