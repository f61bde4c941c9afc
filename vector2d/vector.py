"""Generic 2D vector value type.

``Vector2D`` holds two components of one scalar kind (see
``vector2d.scalars``). Arithmetic follows numpy's result types, so the
result kind of an operator can differ from its inputs (dividing an i32
vector yields an f64 vector). Conversions between kinds come in two
flavours, both driven by ``vector2d.conversions``:

- lossless: ``Vector2D.from_vector``, ``into_vector``, ``from_tuple``,
  ``from_array``;
- lossy: ``cast`` and the generated ``as_i32s()``, ``as_u32s()``, ... methods.

Usage:
------
    v1 = Vector2D(10, 5)                  # i32
    v2 = Vector2D.new(13.0, 11.5)         # f64

    v1.into_vector("f64")                 # Vector2D<f64>(10.0, 5.0)
    v2.as_i32s()                          # Vector2D<i32>(13, 11)
    Vector2D(-10.0, 2.0).as_u32s()        # Vector2D<u32>(0, 2)

    v1.length_squared()                   # 125
    v2.length(), v2.normalise(), v2.angle()
"""

import numbers
from typing import Any, Callable, Optional, Sequence, Tuple, Union

import numpy as np

from vector2d.conversions import cast_scalar, convert_lossless
from vector2d.exceptions import (
    KindMismatchError,
    ScalarRangeError,
    UnsupportedOperationError,
    VectorShapeError,
)
from vector2d.scalars import ScalarKind, infer_kind, is_literal

KindSpec = Union[ScalarKind, str, type, np.dtype]


def _infer_pair_kind(x: Any, y: Any) -> ScalarKind:
    """Pick one kind for both components.

    A numpy scalar fixes the kind and a literal partner adopts it. Two
    literals share a float kind if either is a float.
    """
    x_literal, y_literal = is_literal(x), is_literal(y)
    if x_literal and not y_literal:
        return infer_kind(y)
    if y_literal and not x_literal:
        return infer_kind(x)

    x_kind, y_kind = infer_kind(x), infer_kind(y)
    if x_kind is y_kind:
        return x_kind
    if x_literal and y_literal:
        if x_kind.is_float:
            return x_kind
        if y_kind.is_float:
            return y_kind
        # both integers, one too wide for the default literal kind
        return x_kind if x_kind.bits > y_kind.bits else y_kind
    raise KindMismatchError(f"Components have different kinds: {x_kind} and {y_kind}")


class Vector2D:
    """A 2D vector whose components share one scalar kind."""

    __slots__ = ("_x", "_y", "_kind")

    def __init__(self, x: Any, y: Any, kind: Optional[KindSpec] = None) -> None:
        self._kind: ScalarKind = _infer_pair_kind(x, y) if kind is None else ScalarKind.parse(kind)
        self._x: np.generic = self._kind.coerce(x)
        self._y: np.generic = self._kind.coerce(y)

    @classmethod
    def new(cls, x: Any, y: Any, kind: Optional[KindSpec] = None) -> "Vector2D":
        return cls(x, y, kind)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def x(self) -> np.generic:
        return self._x

    @x.setter
    def x(self, value: Any) -> None:
        self._x = self._kind.coerce(value)

    @property
    def y(self) -> np.generic:
        return self._y

    @y.setter
    def y(self, value: Any) -> None:
        self._y = self._kind.coerce(value)

    @property
    def kind(self) -> ScalarKind:
        return self._kind

    def copy(self) -> "Vector2D":
        """Return a copy of this vector."""
        return Vector2D(self._x, self._y, self._kind)

    __copy__ = copy

    def to_tuple(self) -> Tuple[np.generic, np.generic]:
        return (self._x, self._y)

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=self._kind.dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        # Python int/float comparison is exact across kinds, numpy promotion is not
        return self._x.item() == other._x.item() and self._y.item() == other._y.item()

    # Mutable through the in-place operators and field setters
    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector2D<{self._kind}>({self._x}, {self._y})"

    # ------------------------------------------------------------------
    # Lossless conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_vector(cls, source: "Vector2D", kind: Optional[KindSpec] = None) -> "Vector2D":
        """Convert ``source`` into ``kind`` without loss of precision.

        Args:
            source: Vector to convert
            kind: Target kind; defaults to the source's kind

        Raises:
            LosslessConversionError: If ``source.kind`` does not widen into ``kind``
        """
        target = source.kind if kind is None else ScalarKind.parse(kind)
        return cls(
            convert_lossless(source.x, source.kind, target),
            convert_lossless(source.y, source.kind, target),
            target,
        )

    def into_vector(self, kind: Optional[KindSpec] = None) -> "Vector2D":
        """Convert this vector into ``kind`` without loss of precision."""
        return Vector2D.from_vector(self, kind)

    @classmethod
    def from_tuple(cls, pair: Tuple[Any, Any], kind: Optional[KindSpec] = None) -> "Vector2D":
        """Build a vector from ``(x, y)``, converting losslessly into ``kind``.

        Plain Python literals are stored directly as ``kind`` when it can
        hold them; otherwise their inferred kind must widen into ``kind``.
        """
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise VectorShapeError(f"Expected a 2-tuple, got {pair!r}")
        return cls._from_pair(pair[0], pair[1], kind)

    @classmethod
    def from_array(cls, items: Union[Sequence[Any], np.ndarray], kind: Optional[KindSpec] = None) -> "Vector2D":
        """Build a vector from a 2-element list, sequence or numpy array."""
        if isinstance(items, np.ndarray):
            if items.shape != (2,):
                raise VectorShapeError(f"Expected an array of shape (2,), got {items.shape}")
        elif isinstance(items, (str, bytes)) or not isinstance(items, Sequence) or len(items) != 2:
            raise VectorShapeError(f"Expected a 2-element sequence, got {items!r}")
        return cls._from_pair(items[0], items[1], kind)

    @classmethod
    def _from_pair(cls, x: Any, y: Any, kind: Optional[KindSpec]) -> "Vector2D":
        if kind is not None and is_literal(x) and is_literal(y):
            try:
                return cls(x, y, kind)
            except (KindMismatchError, ScalarRangeError):
                # literals the target cannot hold go through the lossless rule
                pass
        return cls.from_vector(cls(x, y), kind)

    # ------------------------------------------------------------------
    # Lossy casts
    # ------------------------------------------------------------------

    def cast(self, kind: KindSpec) -> "Vector2D":
        """Cast each component into ``kind``, truncating or clamping.

        Signed and float vectors cast into unsigned kinds are clamped to
        zero first; every other pair uses native ``as`` semantics. Never
        raises for overflow, NaN or infinity.

        Raises:
            UnsupportedCastError: If ``kind`` is this vector's own kind
        """
        target = ScalarKind.parse(kind)
        return Vector2D(
            cast_scalar(self._x, self._kind, target),
            cast_scalar(self._y, self._kind, target),
            target,
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _result_kind(self, value: np.generic) -> ScalarKind:
        if value.dtype == self._kind.dtype:
            return self._kind
        return ScalarKind.from_dtype(value.dtype)

    def _fieldwise(self, op: Callable[[Any, Any], Any], rhs_x: np.generic, rhs_y: np.generic) -> "Vector2D":
        # Integer overflow wraps and float division by zero gives inf/NaN
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            x = op(self._x, rhs_x)
            y = op(self._y, rhs_y)
        return Vector2D(x, y, self._result_kind(x))

    def _same_kind(self, other: "Vector2D") -> None:
        if other._kind is not self._kind:
            raise KindMismatchError(f"Cannot combine Vector2D<{self._kind}> with Vector2D<{other._kind}>")

    def _scalar_operand(self, scalar: Any) -> np.generic:
        if isinstance(scalar, Vector2D):
            raise UnsupportedOperationError("Vectors only multiply and divide by scalars")
        return self._kind.coerce(scalar)

    def _assign(self, result: "Vector2D", symbol: str) -> "Vector2D":
        if result._kind is not self._kind:
            raise UnsupportedOperationError(
                f"In-place {symbol} would change Vector2D<{self._kind}> into Vector2D<{result._kind}>"
            )
        self._x = result._x
        self._y = result._y
        return self

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self._same_kind(other)
        return self._fieldwise(np.add, other._x, other._y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self._same_kind(other)
        return self._fieldwise(np.subtract, other._x, other._y)

    def __mul__(self, scalar: Any) -> "Vector2D":
        if not isinstance(scalar, (numbers.Number, Vector2D)):
            return NotImplemented
        factor = self._scalar_operand(scalar)
        return self._fieldwise(np.multiply, factor, factor)

    def __truediv__(self, scalar: Any) -> "Vector2D":
        if not isinstance(scalar, (numbers.Number, Vector2D)):
            return NotImplemented
        divisor = self._scalar_operand(scalar)
        return self._fieldwise(np.true_divide, divisor, divisor)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result, "+=")

    def __isub__(self, other: "Vector2D") -> "Vector2D":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result, "-=")

    def __imul__(self, scalar: Any) -> "Vector2D":
        result = self.__mul__(scalar)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result, "*=")

    def __itruediv__(self, scalar: Any) -> "Vector2D":
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result, "/=")

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def dot(self, other: "Vector2D") -> np.generic:
        """Sum of the component-wise products. Works for every kind."""
        self._same_kind(other)
        with np.errstate(over="ignore", invalid="ignore"):
            return self._x * other._x + self._y * other._y

    def length_squared(self) -> np.generic:
        return self.dot(self)

    def _require_float(self, operation: str) -> None:
        if not self._kind.is_float:
            raise UnsupportedOperationError(
                f"{operation}() needs an f32 or f64 vector, not Vector2D<{self._kind}>"
            )

    def length(self) -> np.floating:
        """Euclidean length, in the vector's own float width."""
        self._require_float("length")
        return np.sqrt(self.length_squared())

    def normalise(self) -> "Vector2D":
        """Unit vector in the same direction.

        A zero vector is not guarded against and yields NaN components.
        """
        self._require_float("normalise")
        return self / self.length()

    def angle(self) -> np.floating:
        """Angle from the positive x axis in radians, in (-pi, pi]."""
        self._require_float("angle")
        # float32 arctan2 is not correctly rounded; round the f64 result instead
        return self._kind.scalar_type(np.arctan2(np.float64(self._y), np.float64(self._x)))


def _named_cast(target: ScalarKind) -> Callable[[Vector2D], Vector2D]:
    def named_cast(self: Vector2D) -> Vector2D:
        return self.cast(target)

    named_cast.__name__ = f"as_{target.short}s"
    named_cast.__qualname__ = f"Vector2D.as_{target.short}s"
    named_cast.__doc__ = f"Cast each component to {target.short}. See ``Vector2D.cast``."
    return named_cast


for _target in ScalarKind:
    setattr(Vector2D, f"as_{_target.short}s", _named_cast(_target))
del _target


__all__ = ["Vector2D"]
