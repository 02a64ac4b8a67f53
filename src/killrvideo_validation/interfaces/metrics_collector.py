"""
Metrics Collector Protocol.

Defines the abstract interface for operational metrics of the request
gate: how many requests were validated and rejected, and how long
validation took.

Design Notes:
    - Non-blocking metric recording
    - Tag/label support for dimensionality
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

# Metric names recorded by the request gate
REQUESTS_METRIC = "validation_requests_total"
REJECTIONS_METRIC = "validation_rejections_total"
DURATION_METRIC = "validation_duration_seconds"


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a timing metric (histogram).

        Args:
            name: Metric name (e.g., "validation_duration_seconds")
            duration_seconds: Duration value
            tags: Optional dimension tags
        """
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a count metric (counter).

        Args:
            name: Metric name (e.g., "validation_rejections_total")
            value: Count value
            tags: Optional dimension tags
        """
        ...

    def get_metrics(self) -> Dict[str, Any]:
        """Return a summary of recorded metrics."""
        ...
