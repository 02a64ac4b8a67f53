"""
Validation Outcomes - Results of One Validation Pass.

These value objects are created and consumed within a single request's
validation pass and carry no identity beyond it.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field, model_validator


class StatusCode(str, Enum):
    """Caller-visible rejection classification."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class FailureKind(str, Enum):
    """Classification of caller-correctable input errors."""

    MISSING_OR_BLANK_FIELD = "MISSING_OR_BLANK_FIELD"
    NON_POSITIVE_NUMBER = "NON_POSITIVE_NUMBER"
    COLLECTION_TOO_LARGE = "COLLECTION_TOO_LARGE"
    COLLECTION_EMPTY = "COLLECTION_EMPTY"
    COLLECTION_ELEMENT_INVALID = "COLLECTION_ELEMENT_INVALID"


class RuleFailure(BaseModel):
    """A single failed rule."""

    field_name: str = Field(..., description="Human-readable field label")
    kind: FailureKind
    message: str = Field(..., description="Rendered failure message")

    model_config = {"frozen": True}


class ValidationOutcome(BaseModel):
    """Result of validating one request against its rule set."""

    variant: str = Field(..., description="Discriminator of the validated request")
    valid: bool
    description: str = Field(
        default="", description="Composite description; empty iff valid"
    )
    failures: Tuple[RuleFailure, ...] = Field(
        default=(), description="Failed rules in rule set order"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_consistency(self) -> "ValidationOutcome":
        if self.valid != (self.description == ""):
            raise ValueError("description must be empty iff the outcome is valid")
        if self.valid != (len(self.failures) == 0):
            raise ValueError("failures must be empty iff the outcome is valid")
        return self

    @property
    def failure_count(self) -> int:
        """Number of failed rules."""
        return len(self.failures)


class Rejection(BaseModel):
    """Caller-visible artifact produced on validation failure."""

    code: StatusCode = StatusCode.INVALID_ARGUMENT
    description: str = Field(..., min_length=1)

    model_config = {"frozen": True}
