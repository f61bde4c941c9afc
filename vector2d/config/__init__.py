"""Configuration package for vector2d.

Platform facts and literal defaults live in ``numerics``; the dataclass used
when inferring kinds from plain Python numbers lives in ``literals``.
"""

from vector2d.config.literals import DEFAULT_LITERAL_CONFIG, LiteralConfig

__all__ = ["DEFAULT_LITERAL_CONFIG", "LiteralConfig"]
