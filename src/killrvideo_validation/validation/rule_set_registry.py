"""
Rule Set Registry - Variant to RuleSet Table.

This module provides a thread-safe registry mapping each request variant
to its rule set. The table is filled once at process start, checked for
completeness, then frozen; lookups afterwards need no coordination.

Usage:
    registry = RuleSetRegistry()
    registry.register(create_user_rules)
    registry.register(rate_video_rules)

    # Fail fast if a variant was forgotten
    registry.ensure_complete(REQUEST_VARIANTS)
    registry.freeze()

    rule_set = registry.get(CreateUserRequest)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, Iterable, List, Type

from pydantic import BaseModel

from killrvideo_validation.validation.errors import (
    DuplicateRuleSetError,
    RegistryFrozenError,
    UnregisteredVariantError,
)
from killrvideo_validation.validation.rules import RuleSet

logger = logging.getLogger(__name__)


@dataclass
class RuleSetInfo:
    """Metadata about a registered rule set."""

    kind: str
    label: str
    rule_count: int
    rules: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "label": self.label,
            "rule_count": self.rule_count,
            "rules": self.rules,
        }


class RuleSetRegistry:
    """
    Thread-safe registry of rule sets keyed by request variant.

    Supports:
        - Registration and unregistration before startup completes
        - Completeness check against the supported variants
        - Freezing into a read-only table
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._rule_sets: Dict[Type[BaseModel], RuleSet] = {}
        self._lock = RLock()
        self._frozen = False
        logger.debug("RuleSetRegistry initialized")

    def register(self, rule_set: RuleSet) -> None:
        """
        Register a rule set for its variant.

        Args:
            rule_set: Rule set bound to a request variant

        Raises:
            DuplicateRuleSetError: If the variant already has a rule set
            RegistryFrozenError: If the registry has been frozen
        """
        with self._lock:
            self._check_not_frozen()
            if rule_set.variant in self._rule_sets:
                raise DuplicateRuleSetError(rule_set.kind)

            self._rule_sets[rule_set.variant] = rule_set
            logger.debug(
                f"Registered rule set: {rule_set.kind} ({len(rule_set.rules)} rules)"
            )

    def unregister(self, variant: Type[BaseModel]) -> bool:
        """
        Unregister the rule set of a variant.

        Returns:
            True if a rule set was removed, False if none was registered

        Raises:
            RegistryFrozenError: If the registry has been frozen
        """
        with self._lock:
            self._check_not_frozen()
            if variant not in self._rule_sets:
                return False
            del self._rule_sets[variant]
            logger.info(f"Unregistered rule set: {variant.__name__}")
            return True

    def get(self, variant: Type[Any]) -> RuleSet:
        """
        Get the rule set of a variant.

        Raises:
            UnregisteredVariantError: If no rule set is registered
        """
        rule_set = self._rule_sets.get(variant)
        if rule_set is None:
            raise UnregisteredVariantError([getattr(variant, "__name__", str(variant))])
        return rule_set

    def ensure_complete(self, variants: Iterable[Type[BaseModel]]) -> None:
        """
        Check that every variant has a rule set.

        Raises:
            UnregisteredVariantError: Listing every variant without one
        """
        with self._lock:
            missing = [v.__name__ for v in variants if v not in self._rule_sets]
        if missing:
            logger.error(f"Rule table incomplete, missing: {', '.join(missing)}")
            raise UnregisteredVariantError(missing)

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._lock:
            self._frozen = True
            logger.info(f"Rule table frozen with {len(self._rule_sets)} rule sets")

    def list_all(self) -> Dict[str, RuleSetInfo]:
        """List all registered rule sets keyed by variant kind."""
        with self._lock:
            return {
                rule_set.kind: RuleSetInfo(
                    kind=rule_set.kind,
                    label=rule_set.label,
                    rule_count=len(rule_set.rules),
                    rules=list(rule_set.describe()),
                )
                for rule_set in self._rule_sets.values()
            }

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def registered_count(self) -> int:
        """Number of registered rule sets."""
        return len(self._rule_sets)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                "Rule table is frozen; rule sets can only be registered at startup"
            )
