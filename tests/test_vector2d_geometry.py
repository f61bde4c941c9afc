"""Tests for Vector2D geometric queries."""

import math

import numpy as np
import pytest

from vector2d import KindMismatchError, UnsupportedOperationError, Vector2D


def test_dot():
    v1 = Vector2D(10.0, 5.0)
    v2 = Vector2D(1.5, 2.0)
    assert Vector2D.dot(v1, v2) == 25.0
    assert v1.dot(v2) == 25.0


def test_dot_requires_matching_kinds():
    with pytest.raises(KindMismatchError):
        Vector2D(1, 2).dot(Vector2D(1.0, 2.0))


def test_length_squared_for_integers():
    result = Vector2D(10, 5).length_squared()
    assert result == 125
    assert type(result) is np.int32


def test_length(float_kind):
    result = Vector2D(3.0, 4.0, float_kind).length()
    assert result == 5.0
    assert result.dtype == float_kind.dtype


def test_angle(float_kind):
    result = Vector2D(2.0, 2.0, float_kind).angle()
    assert result.dtype == float_kind.dtype
    assert result == float_kind.scalar_type(math.pi) / float_kind.scalar_type(4)


def test_angle_f64_is_exact():
    assert Vector2D(2.0, 2.0).angle() == math.pi / 4


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1.0, 0.0, 0.0),
        (0.0, 1.0, math.pi / 2),
        (-1.0, 0.0, math.pi),
        (0.0, -1.0, -math.pi / 2),
        (0.0, 0.0, 0.0),
    ],
)
def test_angle_quadrants(x, y, expected):
    assert Vector2D(x, y).angle() == pytest.approx(expected)


def test_normalise_has_unit_length(float_kind):
    unit = Vector2D(3.0, 4.0, float_kind).normalise()
    assert unit.kind is float_kind
    assert unit.length() == pytest.approx(1.0, rel=1e-6)
    assert unit.x == pytest.approx(0.6, rel=1e-6)
    assert unit.y == pytest.approx(0.8, rel=1e-6)


@pytest.mark.parametrize("x, y", [(13.0, 11.5), (-0.25, 7.0), (1e-3, -2e3)])
def test_normalise_times_length_reconstructs(x, y):
    v = Vector2D(x, y)
    rebuilt = v.normalise() * v.length()
    assert rebuilt.x == pytest.approx(x)
    assert rebuilt.y == pytest.approx(y)


def test_normalise_zero_vector_is_nan():
    unit = Vector2D(0.0, 0.0).normalise()
    assert math.isnan(unit.x)
    assert math.isnan(unit.y)


@pytest.mark.parametrize("operation", ["length", "normalise", "angle"])
def test_float_only_operations_reject_integers(operation):
    with pytest.raises(UnsupportedOperationError):
        getattr(Vector2D(3, 4), operation)()
