"""End-to-end walk-through of the public API."""

import pytest

from vector2d import ScalarKind, Vector2D


def test_usage_walkthrough():
    # Components may be of any supported kind
    v1 = Vector2D(x=10, y=5)
    v2 = Vector2D.new(13.0, 11.5)
    assert v1.kind is ScalarKind.I32
    assert v2.kind is ScalarKind.F64

    # Lossless conversions work from either side
    assert v1.into_vector("f64") == Vector2D.new(10.0, 5.0)
    assert Vector2D.from_vector(v1, "f64") == Vector2D.new(10.0, 5.0)

    # Without a lossless path, use the named casts
    assert v2.as_i32s() == Vector2D.new(13, 11)
    assert Vector2D(-10.0, 2.0).as_u32s() == Vector2D(0, 2)

    # dot() and length_squared() work for every kind, the rest for floats only
    assert v1.length_squared() == 125
    length = v2.length()
    direction = v2.normalise()
    rebuilt = direction * length
    assert rebuilt.x == pytest.approx(v2.x)
    assert rebuilt.y == pytest.approx(v2.y)

    # Vectors add and subtract with each other and scale by scalars
    assert v2 + v1.into_vector("f64") == Vector2D.new(23.0, 16.5)

    # Tuples and two-element arrays convert as well
    v4 = Vector2D.new(1.5, 2.3)
    assert Vector2D.from_tuple((1.5, 2.3)) == v4
    assert Vector2D.from_array([1.5, 2.3]) == v4
