"""
Validation Package - Request Validation Engine.

This package provides:
    - Rule / RuleSet: Field checks and their per-variant ordering
    - RuleSetRegistry: Variant -> RuleSet table, frozen at startup
    - ErrorAggregator: Ordered composite description per request
    - Validator: Exhaustive rule evaluation producing a ValidationOutcome
    - RejectionEmitter: Error sink + INVALID_ARGUMENT rejection delivery

Design Principles:
    - Evaluate every rule; never short-circuit
    - Failures are data, not exceptions
    - Missing rule sets fail fast at startup
"""

from killrvideo_validation.validation.errors import (
    DuplicateRuleSetError,
    RegistryFrozenError,
    RequestRejected,
    UnregisteredVariantError,
    ValidationEngineError,
)
from killrvideo_validation.validation.rules import MAX_BULK_IDS, Rule, RuleSet
from killrvideo_validation.validation.aggregator import ErrorAggregator
from killrvideo_validation.validation.rule_set_registry import (
    RuleSetInfo,
    RuleSetRegistry,
)
from killrvideo_validation.validation.rule_sets import (
    DEFAULT_RULE_SETS,
    build_default_registry,
)
from killrvideo_validation.validation.validator import Validator
from killrvideo_validation.validation.rejection_emitter import RejectionEmitter

__all__ = [
    "DuplicateRuleSetError",
    "RegistryFrozenError",
    "RequestRejected",
    "UnregisteredVariantError",
    "ValidationEngineError",
    "MAX_BULK_IDS",
    "Rule",
    "RuleSet",
    "ErrorAggregator",
    "RuleSetInfo",
    "RuleSetRegistry",
    "DEFAULT_RULE_SETS",
    "build_default_registry",
    "Validator",
    "RejectionEmitter",
]
