"""Logging setup for the trip planner.

Installs either a plain text formatter or a JSON formatter on the
package logger, as selected by ObservabilityConfig.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "trip_planner"

# Attributes every LogRecord carries; anything else arrived through extra=
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs log records as JSON.

    Each entry includes timestamp, level, logger name and message, plus
    any fields passed through ``extra=`` on the logging call.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        config: Observability settings; defaults to the global config.
        logger_name: Name of the logger to configure.

    Returns:
        The configured logger.
    """
    config = config or get_config().observability

    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level.upper())
    logger.handlers = []

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)

    return logger
