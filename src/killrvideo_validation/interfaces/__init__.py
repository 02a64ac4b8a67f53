"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external collaborators of the validation engine. High-level modules depend
on these abstractions, not on concrete implementations.

Protocols:
    - ErrorSink: Error-reporting sink for rejected requests
    - ResponseChannel: Caller's response stream
    - MetricsCollector: Operational metrics abstraction

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - No implementation details leak into interfaces
"""

from killrvideo_validation.interfaces.error_sink import ErrorSink
from killrvideo_validation.interfaces.metrics_collector import MetricsCollector
from killrvideo_validation.interfaces.response_channel import ResponseChannel

__all__ = [
    "ErrorSink",
    "MetricsCollector",
    "ResponseChannel",
]
