"""
Response Channel Protocol.

The caller's response channel, as handed to a handler by the RPC
transport. A rejected request receives exactly one error followed by
completion; nothing else is sent on the channel afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from killrvideo_validation.domain.outcomes import Rejection


@runtime_checkable
class ResponseChannel(Protocol):
    """Abstract interface for a caller's response stream."""

    def on_error(self, rejection: Rejection) -> None:
        """Deliver a rejection to the caller."""
        ...

    def on_completed(self) -> None:
        """Signal that no further response will be sent."""
        ...
