"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Type

import pytest
from pydantic import BaseModel

from killrvideo_validation.adapters.memory_sink import InMemoryErrorSink
from killrvideo_validation.adapters.metrics_collector import InMemoryMetricsCollector
from killrvideo_validation.adapters.response_channel import RecordingResponseChannel
from killrvideo_validation.gate.request_gate import RequestGate
from killrvideo_validation.validation.rejection_emitter import RejectionEmitter
from killrvideo_validation.validation.validator import Validator
from tests.fixtures.requests import valid_requests


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo logger thresholds set by gate factories during a test."""
    names = ["killrvideo_validation", "killrvideo_validation.rejections"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture(scope="session")
def validator() -> Validator:
    """Validator over the default rule table (read-only, shareable)."""
    return Validator()


@pytest.fixture
def memory_sink() -> InMemoryErrorSink:
    """Create in-memory error sink."""
    return InMemoryErrorSink()


@pytest.fixture
def channel() -> RecordingResponseChannel:
    """Create a fresh response channel."""
    return RecordingResponseChannel()


@pytest.fixture
def emitter(memory_sink: InMemoryErrorSink) -> RejectionEmitter:
    """Create rejection emitter writing to the in-memory sink."""
    return RejectionEmitter(memory_sink)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def gate(
    validator: Validator,
    emitter: RejectionEmitter,
    metrics_collector: InMemoryMetricsCollector,
) -> RequestGate:
    """Create a fully wired request gate."""
    return RequestGate(
        validator=validator,
        emitter=emitter,
        metrics_collector=metrics_collector,
    )


@pytest.fixture
def valid_by_variant() -> Dict[Type[BaseModel], BaseModel]:
    """One valid request per variant."""
    return valid_requests()
