"""
Test Suite for KillrVideo Validation.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Request gate end-to-end tests
    - performance/: Concurrency and throughput checks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                              # All tests
    pytest tests/unit/                         # Unit tests only
    pytest tests/integration/                  # Integration tests only
    pytest --cov=src/killrvideo_validation     # With coverage
"""
