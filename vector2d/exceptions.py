"""vector2d exception hierarchy.

Numeric edge cases (overflow, NaN, division by zero) are handled by policy
and never raise. These exceptions cover requests for which no rule exists:
an unknown scalar kind, a conversion outside the lossless relation, or an
operation that only floating-point vectors support.
"""


class Vector2DError(Exception):
    """Root of all vector2d exceptions."""


class ScalarKindError(Vector2DError, TypeError):
    """A value or type that does not map to a supported scalar kind."""


class KindMismatchError(ScalarKindError):
    """Operands carry different scalar kinds."""


class ScalarRangeError(Vector2DError, ValueError):
    """A literal does not fit the range of the requested scalar kind."""


class ConversionError(Vector2DError, TypeError):
    """Base class for conversion failures between scalar kinds."""


class LosslessConversionError(ConversionError):
    """No lossless conversion exists between the two kinds."""


class UnsupportedCastError(ConversionError):
    """No lossy cast is defined between the two kinds."""


class UnsupportedOperationError(Vector2DError, TypeError):
    """The operation is not defined for this vector's kind or operand."""


class VectorShapeError(Vector2DError, ValueError):
    """A tuple or array does not hold exactly two elements."""
