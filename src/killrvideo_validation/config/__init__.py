"""
Configuration Package - Models and Loaders.

This package handles the ambient configuration of the request gate:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - GateConfig: Root configuration object
    - LoggingConfig: Log level and rendering
    - ErrorSinkConfig: Which error sink receives rejections
    - MetricsConfig: Gate metrics on/off

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. development, production)
"""

from killrvideo_validation.config.loader import ConfigLoader, load_config
from killrvideo_validation.config.models import (
    ErrorSinkConfig,
    GateConfig,
    LoggingConfig,
    MetricsConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "ErrorSinkConfig",
    "GateConfig",
    "LoggingConfig",
    "MetricsConfig",
]
