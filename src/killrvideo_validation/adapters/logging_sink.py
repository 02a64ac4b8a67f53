"""
Logging Error Sink.

Writes rejection descriptions through a standard library logger at
ERROR level.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

DEFAULT_LOGGER_NAME = "killrvideo_validation.rejections"


class LoggingErrorSink:
    """Error sink backed by a stdlib logger."""

    def __init__(
        self,
        logger_name: str = DEFAULT_LOGGER_NAME,
        level: Optional[int] = None,
    ) -> None:
        """
        Initialize logging sink.

        Args:
            logger_name: Name of the logger receiving rejections
            level: Threshold set on that logger; left untouched when None
        """
        self._logger = logging.getLogger(logger_name)
        if level is not None:
            self._logger.setLevel(level)

    def error(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the message at ERROR, with context as record extras."""
        self._logger.error(message, extra={"validation": dict(context or {})})
