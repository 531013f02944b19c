"""
Test Suite for Agreement Query.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline runs and property checks
    - fixtures/: Shared YAML configuration fixtures

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
