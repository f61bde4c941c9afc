"""Numeric platform constants."""

import numpy as np

# Width of the pointer-sized kinds (isize/usize) on the running platform
POINTER_WIDTH_BITS = np.dtype(np.intp).itemsize * 8

# Narrowest pointer width any platform may have. Conversions *into* a
# pointer-sized kind are only lossless when they fit this width.
MIN_POINTER_WIDTH_BITS = 16

# Kinds given to plain Python literals when nothing else fixes the kind
DEFAULT_INTEGER_LITERAL_KIND = "i32"
WIDE_INTEGER_LITERAL_KIND = "i64"
DEFAULT_FLOAT_LITERAL_KIND = "f64"
