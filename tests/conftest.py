"""Pytest configuration and shared fixtures for klaw-adt tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_adt import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_adt import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from klaw_adt import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_adt import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from klaw_adt import Left

    return Left('left')


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from klaw_adt import Right

    return Right(123)
