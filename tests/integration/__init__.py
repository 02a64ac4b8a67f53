"""
Integration Tests - Request Gate End-to-End.

These tests wire the default rule table, a rejection emitter and an
in-memory or logging sink together and drive requests through the gate.

Test Files:
    - test_request_gate.py: Admission, rejection delivery and gate wiring
"""
