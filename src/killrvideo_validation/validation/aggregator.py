"""
Error Aggregator - Composite Description of One Validation Pass.

Accumulates failed-rule records in evaluation order. A fresh aggregator
is created for every validation pass and turned into an immutable
ValidationOutcome at the end; it is never shared across requests.

Format:
    Validation error for '<request>' :
    <tab><tab><first failure message>
    <tab><tab><second failure message>
"""

from __future__ import annotations

from typing import Any, List, Tuple

from killrvideo_validation.domain.outcomes import RuleFailure, ValidationOutcome

HEADER_TEMPLATE = "Validation error for '{request}' :"
LINE_INDENT = "\t\t"


class ErrorAggregator:
    """Append-only accumulator of rule failures for one request."""

    def __init__(self, header: str, variant: str) -> None:
        """
        Initialize aggregator.

        Args:
            header: First line of the composite description
            variant: Discriminator of the request being validated
        """
        self.header = header
        self.variant = variant
        self._failures: List[RuleFailure] = []

    @classmethod
    def for_request(cls, request: Any) -> "ErrorAggregator":
        """Create an aggregator whose header identifies ``request``."""
        return cls(
            header=HEADER_TEMPLATE.format(request=request),
            variant=getattr(request, "kind", type(request).__name__),
        )

    def append(self, failure: RuleFailure) -> None:
        """Record a failed rule."""
        self._failures.append(failure)

    @property
    def failures(self) -> Tuple[RuleFailure, ...]:
        return tuple(self._failures)

    @property
    def has_failures(self) -> bool:
        return len(self._failures) > 0

    @property
    def lines(self) -> List[str]:
        """One indented line per failure, in insertion order."""
        return [f"{LINE_INDENT}{failure.message}" for failure in self._failures]

    @property
    def description(self) -> str:
        """Header plus all failure lines; empty when nothing failed."""
        if not self._failures:
            return ""
        return "\n".join([self.header, *self.lines])

    def to_outcome(self) -> ValidationOutcome:
        """Freeze the accumulated failures into a ValidationOutcome."""
        return ValidationOutcome(
            variant=self.variant,
            valid=not self.has_failures,
            description=self.description,
            failures=self.failures,
        )
