"""Literal inference configuration."""

from dataclasses import dataclass

from vector2d.config.numerics import (
    DEFAULT_FLOAT_LITERAL_KIND,
    DEFAULT_INTEGER_LITERAL_KIND,
    WIDE_INTEGER_LITERAL_KIND,
)


@dataclass(frozen=True)
class LiteralConfig:
    """Kinds assigned to plain Python numbers.

    Attributes:
        integer_kind: Kind for ``int`` literals that fit it.
        wide_integer_kind: Fallback kind for ``int`` literals too large for
            ``integer_kind``.
        float_kind: Kind for ``float`` literals.
    """

    integer_kind: str = DEFAULT_INTEGER_LITERAL_KIND
    wide_integer_kind: str = WIDE_INTEGER_LITERAL_KIND
    float_kind: str = DEFAULT_FLOAT_LITERAL_KIND


DEFAULT_LITERAL_CONFIG = LiteralConfig()
