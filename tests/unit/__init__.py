"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory or mocked
dependencies. Unit tests should be fast, deterministic, and focused.
"""
