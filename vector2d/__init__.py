"""Generic 2D vectors over fixed-width numeric kinds.

This package provides a single value type, ``Vector2D``, parameterised over
eight scalar kinds (i32, i64, isize, u32, u64, usize, f32, f64). Key modules:

- scalars: The scalar kinds and literal inference
- conversions: Lossless conversion relation and the lossy cast matrix
- vector: The Vector2D type, its operators and geometric queries
- exceptions: Errors raised for undefined conversions and operations

Design note: this module exposes a small, explicit public API via ``__all__``.
"""

from vector2d.conversions import CAST_MATRIX, LOSSLESS_CONVERSIONS, CastRule, is_lossless
from vector2d.exceptions import (
    ConversionError,
    KindMismatchError,
    LosslessConversionError,
    ScalarKindError,
    ScalarRangeError,
    UnsupportedCastError,
    UnsupportedOperationError,
    Vector2DError,
    VectorShapeError,
)
from vector2d.scalars import ScalarKind, infer_kind
from vector2d.vector import Vector2D

__all__ = [
    "CAST_MATRIX",
    "CastRule",
    "ConversionError",
    "KindMismatchError",
    "LOSSLESS_CONVERSIONS",
    "LosslessConversionError",
    "ScalarKind",
    "ScalarKindError",
    "ScalarRangeError",
    "UnsupportedCastError",
    "UnsupportedOperationError",
    "Vector2D",
    "Vector2DError",
    "VectorShapeError",
    "infer_kind",
    "is_lossless",
]
