"""
Test Suite for Fund Explorer.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests and query properties
    - performance/: Timing benchmarks (large cases marked slow)
    - fixtures/: Sample dataset and configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not slow"                    # Skip large benchmarks
"""
