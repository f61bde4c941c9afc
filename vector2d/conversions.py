"""Conversion matrix between scalar kinds.

Two relations connect the scalar kinds:

- Lossless conversions: injective widenings that preserve every value
  exactly (i32 -> f64, u32 -> i64, f32 -> f64, ...). These back
  ``Vector2D.from_vector``/``into_vector`` and tuple/array construction.
- Lossy casts: named ``as_*s`` casts, defined for every ordered pair of
  distinct kinds. Each pair uses exactly one rule:

  * ``LOWER_BOUNDED`` for signed or float -> unsigned: clamp the value to a
    minimum of zero, then cast. NaN is not greater than zero and clamps to
    zero, so no negative input wraps to a huge unsigned value.
  * ``SIMPLE`` for every other pair, with native ``as`` semantics:
    integers wrap (two's complement), floats truncate toward zero and
    saturate at the target bounds (NaN -> 0), and conversions into floats
    round to nearest (overflow -> inf).

Both relations are derived from the kinds' properties and built once at
import time; no pair is written out by hand.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Tuple

import numpy as np

from vector2d.exceptions import LosslessConversionError, UnsupportedCastError
from vector2d.scalars import ScalarKind

logger = logging.getLogger(__name__)

KindPair = Tuple[ScalarKind, ScalarKind]


class CastRule(Enum):
    """How a lossy cast treats its input before narrowing."""

    SIMPLE = "simple"
    LOWER_BOUNDED = "lower_bounded"


# ============================================================================
# Matrix construction
# ============================================================================


def _widens_losslessly(source: ScalarKind, target: ScalarKind) -> bool:
    if source is target:
        return True
    if source.is_float:
        return target.is_float and source.value_bits <= target.value_bits
    if target.is_float:
        return source.value_bits <= target.value_bits
    if source.is_signed and target.is_unsigned:
        return False
    return source.value_bits <= target.guaranteed_value_bits


def _select_cast_rule(source: ScalarKind, target: ScalarKind) -> CastRule:
    if target.is_unsigned and not source.is_unsigned:
        return CastRule.LOWER_BOUNDED
    return CastRule.SIMPLE


def _build_lossless_conversions() -> FrozenSet[KindPair]:
    return frozenset(
        (source, target)
        for source in ScalarKind
        for target in ScalarKind
        if _widens_losslessly(source, target)
    )


def _build_cast_matrix() -> Dict[KindPair, CastRule]:
    return {
        (source, target): _select_cast_rule(source, target)
        for source in ScalarKind
        for target in ScalarKind
        if source is not target
    }


LOSSLESS_CONVERSIONS: FrozenSet[KindPair] = _build_lossless_conversions()
CAST_MATRIX: Dict[KindPair, CastRule] = _build_cast_matrix()

logger.debug(
    f"Built conversion matrix: {len(LOSSLESS_CONVERSIONS)} lossless pairs, "
    f"{len(CAST_MATRIX)} cast pairs"
)


# ============================================================================
# Queries
# ============================================================================


def is_lossless(source: ScalarKind, target: ScalarKind) -> bool:
    """Return True if every ``source`` value converts exactly to ``target``."""
    return (source, target) in LOSSLESS_CONVERSIONS


def lossless_targets(source: ScalarKind) -> List[ScalarKind]:
    """Kinds that ``source`` converts into without loss, itself included."""
    return [target for target in ScalarKind if is_lossless(source, target)]


def cast_targets(source: ScalarKind) -> List[ScalarKind]:
    """Kinds that ``source`` can be cast into."""
    return [target for target in ScalarKind if (source, target) in CAST_MATRIX]


def cast_rule(source: ScalarKind, target: ScalarKind) -> CastRule:
    """Return the rule used to cast ``source`` into ``target``.

    Raises:
        UnsupportedCastError: If no cast is defined for the pair.
    """
    try:
        return CAST_MATRIX[(source, target)]
    except KeyError:
        raise UnsupportedCastError(f"No cast defined from {source} to {target}") from None


# ============================================================================
# Per-field conversion
# ============================================================================


def _native_cast(value: np.generic, target: ScalarKind) -> np.generic:
    """numpy cast: integers wrap, conversions into floats round to nearest."""
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(value).astype(target.dtype)[()]


def _float_to_integer(value: np.generic, target: ScalarKind) -> np.generic:
    number = float(value)
    if math.isnan(number):
        return target.zero
    if number <= target.min_value:
        return target.scalar_type(target.min_value)
    if number >= target.max_value:
        return target.scalar_type(target.max_value)
    return target.scalar_type(math.trunc(number))


def _clamp_at_zero(value: np.generic, source: ScalarKind) -> np.generic:
    # NaN fails the comparison and clamps to zero as well
    if value > source.zero:
        return value
    if value != source.zero:
        logger.debug(f"Clamped {source} value {value} to zero")
    return source.zero


def simple_cast(value: np.generic, source: ScalarKind, target: ScalarKind) -> np.generic:
    """Cast with native narrowing semantics; never raises for overflow or NaN."""
    if source.is_float and not target.is_float:
        return _float_to_integer(value, target)
    return _native_cast(value, target)


def lower_bounded_cast(value: np.generic, source: ScalarKind, target: ScalarKind) -> np.generic:
    """Clamp to a minimum of zero, then cast."""
    return simple_cast(_clamp_at_zero(value, source), source, target)


_CAST_FUNCTIONS = {
    CastRule.SIMPLE: simple_cast,
    CastRule.LOWER_BOUNDED: lower_bounded_cast,
}


def cast_scalar(value: Any, source: ScalarKind, target: ScalarKind) -> np.generic:
    """Cast one field from ``source`` to ``target`` using the pair's rule.

    Raises:
        UnsupportedCastError: If ``source`` and ``target`` are the same kind.
    """
    rule = cast_rule(source, target)
    return _CAST_FUNCTIONS[rule](source.coerce(value), source, target)


def convert_lossless(value: Any, source: ScalarKind, target: ScalarKind) -> np.generic:
    """Convert one field from ``source`` to ``target`` without loss.

    This is the single per-field rule behind every lossless vector
    conversion.

    Raises:
        LosslessConversionError: If the pair is not a lossless widening.
    """
    if not is_lossless(source, target):
        raise LosslessConversionError(
            f"No lossless conversion from {source} to {target}; use an as_{target.short}s() cast"
        )
    return _native_cast(source.coerce(value), target)


__all__ = [
    "CAST_MATRIX",
    "CastRule",
    "LOSSLESS_CONVERSIONS",
    "cast_rule",
    "cast_scalar",
    "cast_targets",
    "convert_lossless",
    "is_lossless",
    "lossless_targets",
    "lower_bounded_cast",
    "simple_cast",
]
