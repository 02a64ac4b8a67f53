"""
Domain Layer - Requests and Validation Results.

    - requests: Request variants forming the ``Request`` tagged union
    - outcomes: ValidationOutcome, RuleFailure, Rejection and their enums
"""

from killrvideo_validation.domain.outcomes import (
    FailureKind,
    Rejection,
    RuleFailure,
    StatusCode,
    ValidationOutcome,
)
from killrvideo_validation.domain.requests import (
    REQUEST_VARIANTS,
    Request,
    parse_request,
    variant_kind,
)

__all__ = [
    "FailureKind",
    "Rejection",
    "RuleFailure",
    "StatusCode",
    "ValidationOutcome",
    "REQUEST_VARIANTS",
    "Request",
    "parse_request",
    "variant_kind",
]
