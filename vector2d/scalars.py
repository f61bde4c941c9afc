"""Scalar kinds a Vector2D can be parameterised over.

Python has no fixed-width numeric primitives, so each kind is backed by a
numpy scalar type. The pointer-sized kinds (``isize``/``usize``) share their
numpy type with one of the fixed-width kinds on every platform numpy
supports; they stay distinct kinds here because the lossless conversion
rules treat them differently.

Usage:
------
    kind = ScalarKind.parse("f32")
    kind.coerce(1.5)            # np.float32(1.5)
    infer_kind(10)              # ScalarKind.I32
    infer_kind(np.uint64(3))    # ScalarKind.U64
"""

import numbers
from enum import Enum
from typing import Any, Union

import numpy as np

from vector2d.config.literals import DEFAULT_LITERAL_CONFIG, LiteralConfig
from vector2d.config.numerics import MIN_POINTER_WIDTH_BITS
from vector2d.exceptions import KindMismatchError, ScalarKindError, ScalarRangeError


class ScalarCategory(Enum):
    """Broad numeric family of a scalar kind."""

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"


class ScalarKind(Enum):
    """Supported scalar kinds."""

    I32 = ("i32", np.int32, ScalarCategory.SIGNED, False)
    I64 = ("i64", np.int64, ScalarCategory.SIGNED, False)
    ISIZE = ("isize", np.intp, ScalarCategory.SIGNED, True)
    U32 = ("u32", np.uint32, ScalarCategory.UNSIGNED, False)
    U64 = ("u64", np.uint64, ScalarCategory.UNSIGNED, False)
    USIZE = ("usize", np.uintp, ScalarCategory.UNSIGNED, True)
    F32 = ("f32", np.float32, ScalarCategory.FLOAT, False)
    F64 = ("f64", np.float64, ScalarCategory.FLOAT, False)

    def __init__(self, short: str, scalar_type: type, category: ScalarCategory, pointer_sized: bool):
        self.short = short
        self.scalar_type = scalar_type
        self.category = category
        self.is_pointer_sized = pointer_sized

    def __str__(self) -> str:
        return self.short

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: Union["ScalarKind", str, type, np.dtype]) -> "ScalarKind":
        """Resolve a kind from a kind, short name, numpy type or dtype.

        Raises:
            ScalarKindError: If ``value`` names no supported kind.
        """
        if isinstance(value, ScalarKind):
            return value
        if value is None:
            raise ScalarKindError("A scalar kind is required")
        if isinstance(value, str):
            wanted = value.strip().lower()
            for kind in cls:
                if kind.short == wanted:
                    return kind
            raise ScalarKindError(f"Unknown scalar kind name: {value!r}")
        try:
            dtype = np.dtype(value)
        except (TypeError, ValueError) as e:
            raise ScalarKindError(f"Cannot interpret {value!r} as a scalar kind") from e
        return cls.from_dtype(dtype)

    @classmethod
    def from_dtype(cls, dtype: np.dtype) -> "ScalarKind":
        """Map a numpy dtype to its fixed-width kind.

        Pointer-sized kinds are never returned: numpy gives them the same
        dtype as a fixed-width kind, so the fixed-width one wins.
        """
        for kind in cls:
            if not kind.is_pointer_sized and kind.dtype == dtype:
                return kind
        raise ScalarKindError(f"Unsupported scalar dtype: {dtype}")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.scalar_type)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    @property
    def is_signed(self) -> bool:
        return self.category is ScalarCategory.SIGNED

    @property
    def is_unsigned(self) -> bool:
        return self.category is ScalarCategory.UNSIGNED

    @property
    def is_float(self) -> bool:
        return self.category is ScalarCategory.FLOAT

    @property
    def value_bits(self) -> int:
        """Magnitude bits for integers, significand digits for floats."""
        if self.is_float:
            return np.finfo(self.dtype).nmant + 1
        return self.bits - 1 if self.is_signed else self.bits

    @property
    def guaranteed_value_bits(self) -> int:
        """Value bits this kind holds on every platform."""
        if self.is_pointer_sized:
            return MIN_POINTER_WIDTH_BITS - 1 if self.is_signed else MIN_POINTER_WIDTH_BITS
        return self.value_bits

    @property
    def min_value(self) -> Union[int, float]:
        if self.is_float:
            return float(np.finfo(self.dtype).min)
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> Union[int, float]:
        if self.is_float:
            return float(np.finfo(self.dtype).max)
        return int(np.iinfo(self.dtype).max)

    @property
    def zero(self) -> np.generic:
        return self.scalar_type(0)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def coerce(self, value: Any) -> np.generic:
        """Store ``value`` as this kind without converting between kinds.

        numpy scalars must already carry this kind's dtype. Plain Python
        numbers are literals: ``int`` fits any kind within range, ``float``
        only the float kinds.

        Raises:
            KindMismatchError: If ``value`` belongs to another kind.
            ScalarRangeError: If an ``int`` literal is out of range.
        """
        if isinstance(value, np.generic):
            if value.dtype == self.dtype:
                return self.scalar_type(value)
            raise KindMismatchError(f"Expected a {self.short} scalar, got {value.dtype}")
        if isinstance(value, bool):
            raise KindMismatchError(f"Booleans are not {self.short} scalars")
        if isinstance(value, numbers.Integral):
            value = int(value)
            if not self.min_value <= value <= self.max_value:
                raise ScalarRangeError(f"{value} is out of range for {self.short}")
            return self.scalar_type(value)
        if isinstance(value, numbers.Real) and self.is_float:
            return self.scalar_type(value)
        raise KindMismatchError(f"Cannot store {type(value).__name__} {value!r} as {self.short}")


def infer_kind(value: Any, config: LiteralConfig = DEFAULT_LITERAL_CONFIG) -> ScalarKind:
    """Infer the scalar kind of a single value.

    numpy scalars keep the kind of their dtype. Python ``float`` literals
    take ``config.float_kind``; ``int`` literals take ``config.integer_kind``
    and widen to ``config.wide_integer_kind`` when they do not fit.

    Raises:
        ScalarKindError: If the value is not a supported number.
    """
    if isinstance(value, np.generic):
        return ScalarKind.from_dtype(value.dtype)
    if isinstance(value, bool):
        raise ScalarKindError("Booleans are not supported scalars")
    if isinstance(value, numbers.Integral):
        narrow = ScalarKind.parse(config.integer_kind)
        if narrow.min_value <= value <= narrow.max_value:
            return narrow
        return ScalarKind.parse(config.wide_integer_kind)
    if isinstance(value, numbers.Real):
        return ScalarKind.parse(config.float_kind)
    raise ScalarKindError(f"Unsupported scalar type: {type(value).__name__}")


def is_literal(value: Any) -> bool:
    """Return True for plain Python numbers, whose kind is not fixed."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.generic))


__all__ = ["ScalarCategory", "ScalarKind", "infer_kind", "is_literal"]
