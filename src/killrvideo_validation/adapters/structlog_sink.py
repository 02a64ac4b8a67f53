"""
Structlog Error Sink.

Structured (JSON or console) rejection events via structlog. Each
rejection becomes a ``validation_rejected`` event carrying the
description, with any caller context nested under ``context``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import structlog

DEFAULT_SERVICE_NAME = "killrvideo_validation"


def configure_structlog(use_json: bool = True, log_level: int = logging.INFO) -> None:
    """
    Configure structlog for structured logging.

    Args:
        use_json: Render JSON lines instead of the console renderer
        log_level: Minimum level that is rendered
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


class StructlogErrorSink:
    """Error sink emitting structured structlog events."""

    EVENT = "validation_rejected"

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME) -> None:
        """
        Initialize structlog sink.

        Args:
            service_name: Logger name and ``service`` key on every event
        """
        self.service_name = service_name
        self._logger = structlog.get_logger(service_name)

    def error(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Emit a ``validation_rejected`` event at error level."""
        self._logger.error(
            self.EVENT,
            service=self.service_name,
            description=message,
            context=dict(context or {}),
        )
