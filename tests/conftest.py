"""Pytest configuration and shared fixtures for safetry tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from safetry import success

    return success(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from safetry import failure

    return failure(ValueError('test error'))
