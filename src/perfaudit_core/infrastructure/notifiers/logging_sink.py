"""
Log sink backed by the standard logging module
"""

import json
import logging
from collections.abc import Mapping

from perfaudit_core.infrastructure.notifiers.base import LogSink

VIOLATION_LOGGER_NAME = "perfaudit_core.violations"


class LoggingSink(LogSink):
    """Writes "<message> | <json context>" lines to a dedicated logger"""

    def __init__(self, level: str | int = "WARNING", logger: logging.Logger | None = None):
        """
        Args:
            level: Log level name or number (default: WARNING)
            logger: Logger to write to (default: perfaudit_core.violations)
        """
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            level = resolved
        self.level = level
        self.logger = logger or logging.getLogger(VIOLATION_LOGGER_NAME)

    def log(self, message: str, context: Mapping) -> None:
        self.logger.log(
            self.level,
            "%s | %s",
            message,
            json.dumps(dict(context), ensure_ascii=False, default=str),
        )
