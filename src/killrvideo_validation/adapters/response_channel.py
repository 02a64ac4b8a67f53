"""
Recording Response Channel.

An in-process response channel that records what a handler sent. It
enforces the channel contract: nothing may be sent after completion.
"""

from __future__ import annotations

from typing import Any, List

from killrvideo_validation.domain.outcomes import Rejection


class RecordingResponseChannel:
    """Response channel that keeps values, errors and completion state."""

    def __init__(self) -> None:
        self.values: List[Any] = []
        self.errors: List[Rejection] = []
        self.completed = False

    def on_next(self, value: Any) -> None:
        """Deliver a successful response value."""
        self._check_open()
        self.values.append(value)

    def on_error(self, rejection: Rejection) -> None:
        """Deliver a rejection."""
        self._check_open()
        self.errors.append(rejection)

    def on_completed(self) -> None:
        """Close the channel."""
        self._check_open()
        self.completed = True

    @property
    def rejected(self) -> bool:
        return len(self.errors) > 0

    def _check_open(self) -> None:
        if self.completed:
            raise RuntimeError("Response channel already completed")
