"""
In-Memory Error Sink.

Keeps every reported rejection in memory. Useful in tests and for
diagnostics endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class SinkRecord:
    """A single reported rejection."""

    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class InMemoryErrorSink:
    """Thread-safe error sink that records messages."""

    def __init__(self) -> None:
        self._records: List[SinkRecord] = []
        self._lock = Lock()

    def error(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record the message."""
        with self._lock:
            self._records.append(SinkRecord(message=message, context=dict(context or {})))

    @property
    def records(self) -> List[SinkRecord]:
        with self._lock:
            return list(self._records)

    @property
    def messages(self) -> List[str]:
        """Recorded messages, oldest first."""
        with self._lock:
            return [record.message for record in self._records]

    def clear(self) -> None:
        """Forget all records."""
        with self._lock:
            self._records.clear()
