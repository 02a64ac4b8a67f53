"""
Validator - Evaluate a Request Against Its Rule Set.

Selects the rule set registered for the request's variant and evaluates
every rule in order. Evaluation is never short-circuited, so one invalid
request reports all of its problems at once.

Design Notes:
    - Completeness of the rule table is checked at construction (fail fast)
    - A fresh ErrorAggregator per call; no shared mutable state
    - No logging or emission here; that belongs to the RejectionEmitter
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Type

from pydantic import BaseModel

from killrvideo_validation.domain.outcomes import ValidationOutcome
from killrvideo_validation.domain.requests import REQUEST_VARIANTS
from killrvideo_validation.validation.aggregator import ErrorAggregator
from killrvideo_validation.validation.rule_set_registry import RuleSetRegistry
from killrvideo_validation.validation.rule_sets import build_default_registry

logger = logging.getLogger(__name__)


class Validator:
    """Validates requests against their registered rule sets."""

    def __init__(
        self,
        registry: Optional[RuleSetRegistry] = None,
        variants: Iterable[Type[BaseModel]] = REQUEST_VARIANTS,
    ) -> None:
        """
        Initialize validator.

        Args:
            registry: Rule set registry. Defaults to the frozen default table.
            variants: Variants that must all have a rule set

        Raises:
            UnregisteredVariantError: If any variant lacks a rule set
        """
        self.registry = registry if registry is not None else build_default_registry()
        self.registry.ensure_complete(variants)
        logger.debug(
            f"Validator ready with {self.registry.registered_count} rule sets"
        )

    def validate(self, request: Any) -> ValidationOutcome:
        """
        Validate a request.

        Args:
            request: A request variant instance

        Returns:
            ValidationOutcome; valid iff no rule failed

        Raises:
            UnregisteredVariantError: If the request type has no rule set
        """
        rule_set = self.registry.get(type(request))
        aggregator = ErrorAggregator.for_request(request)

        for rule in rule_set.rules:
            if rule.fails(request):
                aggregator.append(rule.failure(rule_set.label))

        return aggregator.to_outcome()

    def is_valid(self, request: Any) -> bool:
        """Shorthand for ``validate(request).valid``."""
        return self.validate(request).valid
