"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. The rule
table is part of the code and is not configurable here.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    use_json: bool = True
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )

    @property
    def level_number(self) -> int:
        """Numeric stdlib logging level."""
        return logging.getLevelName(self.level)


class ErrorSinkConfig(BaseModel):
    """Where rejection descriptions are reported."""

    kind: Literal["logging", "structlog", "memory"] = "logging"
    logger_name: str = Field(default="killrvideo_validation.rejections", min_length=1)


class MetricsConfig(BaseModel):
    """Request gate metrics settings."""

    enabled: bool = True


class GateConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    service_name: str = Field(default="killrvideo_validation", min_length=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    error_sink: ErrorSinkConfig = Field(default_factory=ErrorSinkConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
