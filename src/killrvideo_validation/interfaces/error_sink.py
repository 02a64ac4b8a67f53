"""
Error Sink Protocol.

Defines the abstract interface for the error-reporting sink. The sink
receives the composite description of every rejected request at error
severity, before the rejection is delivered to the caller.

Design Notes:
    - Injected, never a process-wide singleton
    - Structured context is optional and adapter-specific
    - No side effects on validation results
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ErrorSink(Protocol):
    """Abstract interface for error reporting."""

    def error(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Report a message at error severity.

        Args:
            message: The composite validation description
            context: Optional structured context (variant, status code)
        """
        ...
