"""
KillrVideo Validation - Input Validation Front-End for RPC Services.

Every request reaching a KillrVideo endpoint is checked against the rule
set registered for its variant before any business logic runs. Failures
are aggregated into one ordered, human-readable description and surfaced
to the caller as a single INVALID_ARGUMENT rejection.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Static rule table built once at startup, read-only afterwards
    - Configuration-driven sinks and logging via YAML

Main Components:
    - domain: Request variants, outcomes and rejections
    - interfaces: Protocols for error sinks, response channels, metrics
    - validation: Rules, rule sets, registry, aggregator, validator, emitter
    - gate: Request-handling seam (validate, reject, or pass through)
    - adapters: Infrastructure implementations (sinks, channels, metrics)
    - config: Configuration models and loaders

Example:
    >>> from killrvideo_validation.gate import create_gate
    >>> gate = create_gate()
    >>> if gate.admit(request, channel):
    ...     handle(request)

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for KillrVideo Validation.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import killrvideo_validation
        >>> killrvideo_validation.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("killrvideo_validation").setLevel(level)
