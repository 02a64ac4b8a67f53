"""
In-Memory Gate Metrics.

Keeps one running aggregate per (metric name, tag set) series instead of
raw samples, so memory is bounded by the number of distinct series
(metric names x request variants), not by traffic volume.

Usage:
    metrics = InMemoryMetricsCollector()
    gate = RequestGate(validator, emitter, metrics_collector=metrics)

    metrics.total("validation_rejections_total", variant="create_user")
    metrics.by_variant()["create_user"]
    # {"requests": 12, "rejections": 3}
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, FrozenSet, Optional, Tuple

from killrvideo_validation.interfaces.metrics_collector import (
    REJECTIONS_METRIC,
    REQUESTS_METRIC,
)

SeriesKey = Tuple[str, FrozenSet[Tuple[str, str]]]


@dataclass
class SeriesAggregate:
    """Running aggregate of one metric series."""

    metric_type: str
    count: int = 0
    total: float = 0.0
    last: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.last = value
        self.minimum = value if self.minimum is None else min(self.minimum, value)
        self.maximum = value if self.maximum is None else max(self.maximum, value)

    def merge(self, other: "SeriesAggregate") -> None:
        """Fold another series of the same metric into this one."""
        self.count += other.count
        self.total += other.total
        self.last = other.last
        for value in (other.minimum, other.maximum):
            if value is not None:
                self.minimum = value if self.minimum is None else min(self.minimum, value)
                self.maximum = value if self.maximum is None else max(self.maximum, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.metric_type,
            "count": self.count,
            "total": self.total,
            "last": self.last,
            "min": self.minimum,
            "max": self.maximum,
        }


class InMemoryMetricsCollector:
    """Thread-safe, bounded-memory collector for request gate metrics."""

    def __init__(self) -> None:
        self._series: Dict[SeriesKey, SeriesAggregate] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Fold a duration into its series."""
        self._add(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Fold a count into its series."""
        self._add(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarize metrics per name, across all tag sets.

        Returns:
            Mapping of metric name to count/total/last/min/max
        """
        with self._lock:
            merged: Dict[str, SeriesAggregate] = {}
            for (name, _), series in self._series.items():
                if name not in merged:
                    merged[name] = SeriesAggregate(metric_type=series.metric_type)
                merged[name].merge(series)
        return {name: aggregate.to_dict() for name, aggregate in merged.items()}

    def total(self, name: str, **tags: str) -> float:
        """Sum of values for ``name`` over series whose tags include ``tags``."""
        wanted = set(tags.items())
        with self._lock:
            return sum(
                series.total
                for (series_name, series_tags), series in self._series.items()
                if series_name == name and wanted <= series_tags
            )

    def by_variant(self) -> Dict[str, Dict[str, int]]:
        """Request and rejection counters keyed by request variant."""
        counters: Dict[str, Dict[str, int]] = {}
        with self._lock:
            for (name, tags), series in self._series.items():
                if name not in (REQUESTS_METRIC, REJECTIONS_METRIC):
                    continue
                variant = dict(tags).get("variant")
                if variant is None:
                    continue
                entry = counters.setdefault(variant, {"requests": 0, "rejections": 0})
                key = "requests" if name == REQUESTS_METRIC else "rejections"
                entry[key] += int(series.total)
        return counters

    @property
    def series_count(self) -> int:
        """Number of distinct (name, tags) series held."""
        with self._lock:
            return len(self._series)

    def clear(self) -> None:
        """Drop every series."""
        with self._lock:
            self._series.clear()

    def _add(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        key: SeriesKey = (name, frozenset((tags or {}).items()))
        with self._lock:
            series = self._series.get(key)
            if series is None:
                series = self._series[key] = SeriesAggregate(metric_type=metric_type)
            series.add(value)
