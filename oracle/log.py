"""Structured JSON-lines logging for the ``oracle`` logger.

The library only logs; handlers are attached by the application through
``configure_logging``.
"""

from __future__ import annotations

import json
import logging

LOGGER_NAME = "oracle"

_EXTRA_KEYS = (
    "number",
    "model",
    "prompt_tokens",
    "completion_tokens",
    "errors",
)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with the oracle's extra fields flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, record.__dict__[key])
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exception"] = self.formatException(record.exc_info)
        # values json cannot encode are logged as their str()
        return json.dumps(payload, default=str)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a JSON-lines stream handler to the ``oracle`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    logger.setLevel(level)
    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False
    return logger
