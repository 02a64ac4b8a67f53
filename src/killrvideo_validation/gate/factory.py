"""
Request Gate Factory - Wire a Gate From Configuration.
"""

from __future__ import annotations

import logging
from typing import Optional

from killrvideo_validation import configure_logging
from killrvideo_validation.adapters.logging_sink import LoggingErrorSink
from killrvideo_validation.adapters.memory_sink import InMemoryErrorSink
from killrvideo_validation.adapters.metrics_collector import InMemoryMetricsCollector
from killrvideo_validation.adapters.structlog_sink import (
    StructlogErrorSink,
    configure_structlog,
)
from killrvideo_validation.config.models import ErrorSinkConfig, GateConfig
from killrvideo_validation.gate.request_gate import RequestGate
from killrvideo_validation.interfaces.error_sink import ErrorSink
from killrvideo_validation.interfaces.metrics_collector import MetricsCollector
from killrvideo_validation.validation.rejection_emitter import RejectionEmitter
from killrvideo_validation.validation.validator import Validator

logger = logging.getLogger(__name__)


def create_error_sink(config: GateConfig) -> ErrorSink:
    """Build the error sink selected by ``config.error_sink.kind``."""
    sink_config: ErrorSinkConfig = config.error_sink

    if sink_config.kind == "structlog":
        configure_structlog(
            use_json=config.logging.use_json,
            log_level=config.logging.level_number,
        )
        return StructlogErrorSink(service_name=config.service_name)
    if sink_config.kind == "memory":
        return InMemoryErrorSink()
    return LoggingErrorSink(
        logger_name=sink_config.logger_name,
        level=config.logging.level_number,
    )


def create_gate(
    config: Optional[GateConfig] = None,
    sink: Optional[ErrorSink] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> RequestGate:
    """
    Create a request gate over the default rule table.

    Args:
        config: Gate configuration (defaults apply when omitted)
        sink: Error sink overriding the configured one
        metrics_collector: Collector overriding the in-memory default

    Returns:
        A ready RequestGate

    Raises:
        UnregisteredVariantError: If the rule table is incomplete
    """
    if config is None:
        config = GateConfig()
    configure_logging(config.logging.level_number, config.logging.format)

    if sink is None:
        sink = create_error_sink(config)

    if metrics_collector is None and config.metrics.enabled:
        metrics_collector = InMemoryMetricsCollector()

    gate = RequestGate(
        validator=Validator(),
        emitter=RejectionEmitter(sink),
        metrics_collector=metrics_collector,
    )
    logger.info(
        f"Request gate ready: sink={type(sink).__name__}, "
        f"metrics={'on' if metrics_collector is not None else 'off'}"
    )
    return gate
