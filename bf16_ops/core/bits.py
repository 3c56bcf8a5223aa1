"""
FP32 位模式转换 (Bit reinterpretation)
======================================

Helpers that move between numbers and their raw binary32 patterns without
passing through a float64. Signaling NaN payloads survive these helpers,
which a round trip through a Python ``float`` does not guarantee.

Integer inputs are rounded to binary32 with round-to-nearest-even in pure
integer arithmetic, so the result does not depend on the FPU rounding mode
and matches numpy's ``astype(np.float32)`` for every fixed-width integer.

作者: BF16Ops Project
许可: MIT License
"""
import numbers

import numpy as np

from .layout import (FP32_SIGN_MASK, FP32_EXPONENT_MASK, FP32_ALL_BITS,
                     EXPONENT_BIAS)

# Width of the FP32 significand including the implicit leading one
_SIGNIFICAND_BITS = 24


def float32_to_bits(value):
    """Return the binary32 pattern of ``value`` as a Python int.

    ``value`` is cast to float32 with numpy's round-to-nearest-even cast;
    values beyond the float32 range become signed Infinity. A ``np.float32``
    is reinterpreted as is. Integers take ``int_to_float32_bits`` so they are
    rounded once, never through a float64.

    Raises:
        TypeError: if ``value`` is not a real number
    """
    if isinstance(value, (numbers.Integral, np.integer, np.bool_)):
        return int_to_float32_bits(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, (numbers.Real, np.number)):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    if isinstance(value, np.complexfloating):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    with np.errstate(over='ignore'):
        f32 = np.asarray(value, dtype=np.float32)
    return int(f32.view(np.uint32))


def bits_to_float32(bits):
    """Reinterpret the low 32 bits of ``bits`` as a ``np.float32``."""
    return np.asarray(int(bits) & FP32_ALL_BITS, dtype=np.uint32).view(np.float32)[()]


def int_to_float32_bits(value):
    """Convert an integer to the binary32 pattern of its nearest float32.

    Works for Python ints of any size, numpy integer scalars and bool.
    Ties round to even; magnitudes at or beyond 2^128 after rounding become
    signed Infinity.

    Args:
        value: integer value

    Returns:
        int: 32-bit pattern of ``float32(value)``
    """
    if not isinstance(value, (numbers.Integral, np.integer, np.bool_)):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    value = int(value)

    if value == 0:
        return 0
    sign = FP32_SIGN_MASK if value < 0 else 0
    magnitude = -value if value < 0 else value

    # Unbiased exponent of the leading bit
    exponent = magnitude.bit_length() - 1
    shift = exponent + 1 - _SIGNIFICAND_BITS
    if shift > 0:
        significand = magnitude >> shift
        remainder = magnitude & ((1 << shift) - 1)
        half = 1 << (shift - 1)
        if remainder > half or (remainder == half and (significand & 1)):
            significand += 1
            if significand >> _SIGNIFICAND_BITS:
                significand >>= 1
                exponent += 1
    else:
        significand = magnitude << -shift

    if exponent + EXPONENT_BIAS >= 0xFF:
        return sign | FP32_EXPONENT_MASK
    return sign | ((exponent + EXPONENT_BIAS) << 23) | (significand & 0x7FFFFF)
