"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample gate configuration
    - profiles/: Profiles overlaid on the sample configuration
    - requests.py: Builders for valid requests of every variant

Usage:
    Import builders directly, or use the pytest fixtures in conftest.py.
"""
