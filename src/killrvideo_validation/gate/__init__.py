"""
Gate Package - Request-Handling Seam.

    - RequestGate: validate, reject, or pass a request through
    - create_gate: build a gate from GateConfig
"""

from killrvideo_validation.gate.factory import create_error_sink, create_gate
from killrvideo_validation.gate.request_gate import RequestGate

__all__ = [
    "RequestGate",
    "create_error_sink",
    "create_gate",
]
