"""
bfloat16 机器极限 (Machine limits)
=================================

The bfloat16 counterpart of ``np.finfo(np.float32)``. Values are
``np.float32`` decoded from the canonical patterns in ``layout``.

作者: BF16Ops Project
许可: MIT License
"""
from .bits import bits_to_float32
from .layout import (MAX_FINITE, LOWEST_FINITE, MIN_NORMAL, EPSILON,
                     EXPONENT_BITS, MANTISSA_BITS, TRUNCATED_BITS)


class finfo:
    """bfloat16 极限值

    Attributes:
        bits: total width
        nexp: exponent width
        nmant: explicit mantissa width
        max: largest finite value (3.38953139e38)
        min: most negative finite value
        tiny: smallest positive normal value (2^-126)
        smallest_normal: alias of ``tiny``
        eps: distance from 1.0 to the next bfloat16 (2^-7)
    """
    bits = 1 + EXPONENT_BITS + MANTISSA_BITS
    nexp = EXPONENT_BITS
    nmant = MANTISSA_BITS
    max = bits_to_float32(MAX_FINITE << TRUNCATED_BITS)
    min = bits_to_float32(LOWEST_FINITE << TRUNCATED_BITS)
    tiny = bits_to_float32(MIN_NORMAL << TRUNCATED_BITS)
    smallest_normal = tiny
    eps = bits_to_float32(EPSILON << TRUNCATED_BITS)
