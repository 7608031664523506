"""Pytest configuration and shared fixtures for rslike tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from rslike import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample None value for testing."""
    from rslike import Nothing

    return Nothing()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from rslike import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from rslike import Err

    return Err(ValueError('test error'))
