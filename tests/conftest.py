"""Pytest configuration and fixtures for vector2d tests."""

import pytest

from vector2d import ScalarKind, Vector2D


@pytest.fixture(params=[ScalarKind.F32, ScalarKind.F64], ids=str)
def float_kind(request):
    """Run a test once per floating-point kind."""
    return request.param


@pytest.fixture
def float_pair():
    """The (10, 5) and (1.5, 2) operands used throughout the arithmetic tests."""
    return Vector2D(10.0, 5.0), Vector2D(1.5, 2.0)
