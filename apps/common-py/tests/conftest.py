"""Pytest configuration for common-py tests."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks fast tests with no external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests that make real API calls"
    )
