"""Tests for the named lossy casts on Vector2D."""

import math

import numpy as np
import pytest

from vector2d import ScalarKind, UnsupportedCastError, Vector2D


def test_every_kind_has_a_named_cast():
    for kind in ScalarKind:
        assert callable(getattr(Vector2D, f"as_{kind.short}s"))


def test_named_cast_matches_cast():
    v = Vector2D(-2.5, 7.9)
    assert v.as_u64s() == v.cast("u64")
    assert v.as_u64s().kind is ScalarKind.U64


def test_f64_as_i32_truncates():
    iv = Vector2D(10.5, 11.2).as_i32s()
    assert iv.kind is ScalarKind.I32
    assert iv == Vector2D(10, 11)


def test_f32_as_u32_truncates():
    uv = Vector2D(10.5, 11.2, "f32").as_u32s()
    assert uv.kind is ScalarKind.U32
    assert type(uv.x) is np.uint32
    assert uv == Vector2D(10, 11)


def test_f32_as_u32_is_bounded_at_zero():
    assert Vector2D(-10.5, -11.2, "f32").as_u32s() == Vector2D(0, 0)


def test_mixed_signs_clamp_independently():
    assert Vector2D(-10.0, 2.0).as_u32s() == Vector2D(0, 2)


def test_negative_integers_do_not_wrap_into_unsigned():
    uv = Vector2D(-3, 2**33 + 7, "i64").as_u32s()
    assert uv == Vector2D(0, 7)


def test_narrowing_integer_cast_wraps():
    assert Vector2D(2**32 + 5, -1, "i64").as_i32s() == Vector2D(5, -1)
    assert Vector2D(2**64 - 1, 1, "u64").as_i64s() == Vector2D(-1, 1)


def test_nan_and_infinity():
    v = Vector2D(math.nan, math.inf)
    assert v.as_u64s() == Vector2D(0, 2**64 - 1, "u64")
    assert v.as_i32s() == Vector2D(0, 2**31 - 1)
    narrow = v.as_f32s()
    assert math.isnan(narrow.x)
    assert math.isinf(narrow.y)


def test_lossless_pairs_can_also_be_cast():
    assert Vector2D(10, 5).as_f64s() == Vector2D(10, 5).into_vector("f64")


def test_pointer_sized_casts():
    v = Vector2D(-4, 9, "isize")
    assert v.as_usizes() == Vector2D(0, 9)
    assert v.as_usizes().kind is ScalarKind.USIZE
    assert v.as_i64s().kind is ScalarKind.I64


@pytest.mark.parametrize("kind", list(ScalarKind), ids=str)
def test_casting_to_own_kind_is_unsupported(kind):
    v = Vector2D(1, 2, kind)
    with pytest.raises(UnsupportedCastError):
        getattr(v, f"as_{kind.short}s")()
