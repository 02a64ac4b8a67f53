"""
Validation Engine Errors.

Per-request validation failures are data (ValidationOutcome), never
exceptions. The exceptions below signal programming or configuration
errors in the rule table, plus the opt-in RequestRejected used by
handlers that prefer exception-based control flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from killrvideo_validation.domain.outcomes import Rejection


class ValidationEngineError(Exception):
    """Base class for rule table configuration errors."""

    pass


class UnregisteredVariantError(ValidationEngineError):
    """Raised when a request variant has no registered rule set."""

    def __init__(self, variants: Iterable[str]) -> None:
        self.variants: List[str] = sorted(variants)
        super().__init__(
            f"No rule set registered for request variant(s): {', '.join(self.variants)}"
        )


class DuplicateRuleSetError(ValidationEngineError):
    """Raised when a variant is registered twice."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(
            f"Rule set for '{variant}' is already registered. Use unregister() first."
        )


class RegistryFrozenError(ValidationEngineError):
    """Raised when the registry is modified after startup."""

    pass


class RequestRejected(Exception):
    """Raised after a rejection has been emitted to the caller."""

    def __init__(self, rejection: Rejection) -> None:
        self.rejection = rejection
        super().__init__(rejection.description)
