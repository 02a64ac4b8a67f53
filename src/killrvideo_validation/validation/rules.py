"""
Rules - Single Field Checks and Their Ordered Collections.

A Rule is a named predicate over a request plus a message template. The
predicate returns True when the field is INVALID. Rules are stateless
and reusable across requests; a RuleSet binds an ordered tuple of rules
to one request variant.

Rule constructors:
    - required: identifier or free text absent or blank
    - positive: number <= 0
    - max_items: collection larger than a cap
    - non_empty: collection empty
    - elements_present: any element absent or blank
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Optional, Sequence, Tuple, Type

from pydantic import BaseModel

from killrvideo_validation.domain.outcomes import FailureKind, RuleFailure

# Upper bound for batch identifier lookups
MAX_BULK_IDS = 20

MISSING_TEMPLATE = "{field} should be provided for {request}"
NON_POSITIVE_TEMPLATE = "{field} should be strictly positive for {request}"
EMPTY_TEMPLATE = "{field} should not be empty for {request}"
ELEMENT_INVALID_TEMPLATE = (
    "{field} contains an invalid element: values cannot be null or blank for {request}"
)


def too_large_template(limit: int) -> str:
    """Message template for a collection capped at ``limit`` items."""
    return f"{{field}} is too large: cannot get more than {limit} at once for {{request}}"


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


@dataclass(frozen=True)
class Rule:
    """A single field check."""

    field_name: str
    predicate: Callable[[Any], bool]
    failure_template: str
    kind: FailureKind

    def fails(self, request: Any) -> bool:
        """Return True when ``request`` violates this rule."""
        return bool(self.predicate(request))

    def failure(self, request_label: str) -> RuleFailure:
        """Build the failure record for this rule."""
        return RuleFailure(
            field_name=self.field_name,
            kind=self.kind,
            message=self.failure_template.format(
                field=self.field_name, request=request_label
            ),
        )


@dataclass(frozen=True)
class RuleSet:
    """Ordered rules registered for one request variant."""

    variant: Type[BaseModel]
    label: str
    rules: Tuple[Rule, ...]

    @property
    def kind(self) -> str:
        """Discriminator of the bound variant."""
        return self.variant.model_fields["kind"].default

    def describe(self) -> Sequence[str]:
        """Human-readable summary of the rules, in evaluation order."""
        return [f"{rule.field_name}: {rule.kind.value}" for rule in self.rules]


# =============================================================================
# Rule constructors
# =============================================================================


def required(field_name: str, attribute: str) -> Rule:
    """Identifier or free text must be present and not blank."""
    getter = attrgetter(attribute)
    return Rule(
        field_name=field_name,
        predicate=lambda request: is_blank(getter(request)),
        failure_template=MISSING_TEMPLATE,
        kind=FailureKind.MISSING_OR_BLANK_FIELD,
    )


def positive(field_name: str, attribute: str) -> Rule:
    """Number must be strictly positive."""
    getter = attrgetter(attribute)
    return Rule(
        field_name=field_name,
        predicate=lambda request: getter(request) <= 0,
        failure_template=NON_POSITIVE_TEMPLATE,
        kind=FailureKind.NON_POSITIVE_NUMBER,
    )


def max_items(field_name: str, attribute: str, limit: int = MAX_BULK_IDS) -> Rule:
    """Collection must hold at most ``limit`` items."""
    getter = attrgetter(attribute)
    return Rule(
        field_name=field_name,
        predicate=lambda request: len(getter(request)) > limit,
        failure_template=too_large_template(limit),
        kind=FailureKind.COLLECTION_TOO_LARGE,
    )


def non_empty(field_name: str, attribute: str) -> Rule:
    """Collection must hold at least one item."""
    getter = attrgetter(attribute)
    return Rule(
        field_name=field_name,
        predicate=lambda request: len(getter(request)) == 0,
        failure_template=EMPTY_TEMPLATE,
        kind=FailureKind.COLLECTION_EMPTY,
    )


def elements_present(field_name: str, attribute: str) -> Rule:
    """Every element must be present and not blank; one failure per rule."""
    getter = attrgetter(attribute)
    return Rule(
        field_name=field_name,
        predicate=lambda request: any(is_blank(item) for item in getter(request)),
        failure_template=ELEMENT_INVALID_TEMPLATE,
        kind=FailureKind.COLLECTION_ELEMENT_INVALID,
    )
