"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Error sinks:
    - LoggingErrorSink: Standard library logging at ERROR
    - StructlogErrorSink: Structured JSON/console events
    - InMemoryErrorSink: Captured records for tests and diagnostics

Response channels:
    - RecordingResponseChannel: In-process channel enforcing completion

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No validation logic in adapters
"""

from killrvideo_validation.adapters.logging_sink import LoggingErrorSink
from killrvideo_validation.adapters.memory_sink import InMemoryErrorSink, SinkRecord
from killrvideo_validation.adapters.metrics_collector import InMemoryMetricsCollector
from killrvideo_validation.adapters.response_channel import RecordingResponseChannel
from killrvideo_validation.adapters.structlog_sink import (
    StructlogErrorSink,
    configure_structlog,
)

__all__ = [
    "LoggingErrorSink",
    "InMemoryErrorSink",
    "SinkRecord",
    "InMemoryMetricsCollector",
    "RecordingResponseChannel",
    "StructlogErrorSink",
    "configure_structlog",
]
