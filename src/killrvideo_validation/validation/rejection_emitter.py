"""
Rejection Emitter - Turn a Failed Validation Into a Caller Rejection.

Side effects, in order:
    1. Write the description to the error sink at error severity
    2. Build an INVALID_ARGUMENT Rejection carrying the description
    3. Deliver the Rejection on the caller's response channel
    4. Complete the channel

After emit() returns, the calling handler must not run business logic.
"""

from __future__ import annotations

from typing import Optional

from killrvideo_validation.domain.outcomes import Rejection, StatusCode
from killrvideo_validation.interfaces.error_sink import ErrorSink
from killrvideo_validation.interfaces.response_channel import ResponseChannel


class RejectionEmitter:
    """Emits rejections to a response channel via an injected error sink."""

    def __init__(self, sink: ErrorSink) -> None:
        """
        Initialize emitter.

        Args:
            sink: Error-reporting sink receiving every rejection description
        """
        self.sink = sink

    def emit(
        self,
        description: str,
        channel: ResponseChannel,
        variant: Optional[str] = None,
    ) -> Rejection:
        """
        Report, reject and close the channel.

        Args:
            description: Composite description from the ErrorAggregator
            channel: Caller's response channel
            variant: Optional variant kind, forwarded to the sink as context

        Returns:
            The delivered Rejection

        Raises:
            ValueError: If description is empty
        """
        if not description:
            raise ValueError("Cannot emit a rejection without a description")

        context = {"status": StatusCode.INVALID_ARGUMENT.value}
        if variant is not None:
            context["variant"] = variant
        self.sink.error(description, context)

        rejection = Rejection(
            code=StatusCode.INVALID_ARGUMENT,
            description=description,
        )
        channel.on_error(rejection)
        channel.on_completed()
        return rejection
