"""
Request Gate - Validation Seam of the Request-Handling Layer.

The RequestGate sits between the RPC transport and business logic:
    1. Validate the request against its rule set
    2. On failure, emit one rejection and stop
    3. On success, hand the request back untouched

Three styles are offered to handlers:
    - admit(): returns a bool
    - ensure_valid(): raises RequestRejected after emission
    - guard(): decorator that skips the handler body for invalid requests
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

from killrvideo_validation.domain.outcomes import Rejection
from killrvideo_validation.interfaces.metrics_collector import (
    DURATION_METRIC,
    REJECTIONS_METRIC,
    REQUESTS_METRIC,
    MetricsCollector,
)
from killrvideo_validation.interfaces.response_channel import ResponseChannel
from killrvideo_validation.validation.errors import RequestRejected
from killrvideo_validation.validation.rejection_emitter import RejectionEmitter
from killrvideo_validation.validation.validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestGate:
    """Validates requests and rejects invalid ones before handlers run."""

    def __init__(
        self,
        validator: Validator,
        emitter: RejectionEmitter,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize request gate.

        Args:
            validator: Evaluates requests against their rule sets
            emitter: Reports and delivers rejections
            metrics_collector: Optional gate metrics
        """
        self.validator = validator
        self.emitter = emitter
        self.metrics_collector = metrics_collector

    def admit(self, request: Any, channel: ResponseChannel) -> bool:
        """
        Validate a request, rejecting it on the channel if invalid.

        Returns:
            True if the handler may proceed, False if a rejection was sent
        """
        return self._check(request, channel) is None

    def ensure_valid(self, request: Any, channel: ResponseChannel) -> None:
        """
        Validate a request, raising after the rejection was sent.

        Raises:
            RequestRejected: If the request is invalid
        """
        rejection = self._check(request, channel)
        if rejection is not None:
            raise RequestRejected(rejection)

    def guard(
        self, handler: Callable[..., T]
    ) -> Callable[..., Optional[T]]:
        """
        Wrap a ``handler(request, channel, ...)`` so it only runs when admitted.

        The wrapper returns None without calling the handler when the
        request is rejected.
        """

        @functools.wraps(handler)
        def wrapper(
            request: Any, channel: ResponseChannel, *args: Any, **kwargs: Any
        ) -> Optional[T]:
            if not self.admit(request, channel):
                return None
            return handler(request, channel, *args, **kwargs)

        return wrapper

    def _check(self, request: Any, channel: ResponseChannel) -> Optional[Rejection]:
        start = time.perf_counter()
        outcome = self.validator.validate(request)
        duration = time.perf_counter() - start

        tags = {"variant": outcome.variant}
        if self.metrics_collector is not None:
            self.metrics_collector.record_count(REQUESTS_METRIC, 1, tags)
            self.metrics_collector.record_timing(
                DURATION_METRIC, duration, tags
            )

        if outcome.valid:
            return None

        if self.metrics_collector is not None:
            self.metrics_collector.record_count(REJECTIONS_METRIC, 1, tags)

        logger.debug(
            f"Rejecting {outcome.variant}: {outcome.failure_count} rule(s) failed"
        )
        return self.emitter.emit(outcome.description, channel, variant=outcome.variant)
