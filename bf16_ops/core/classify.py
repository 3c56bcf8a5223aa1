"""
浮点分类器 (Classifier)
=======================

Classifies binary32 and bfloat16 bit patterns into IEEE-754 categories by
inspecting the fields directly. ``math.isnan`` cannot tell a signaling NaN
from a quiet one, and the encoder needs that distinction to quiet NaNs.

```
E == 0,   M == 0      -> ZERO
E == 0,   M != 0      -> SUBNORMAL
E == max, M == 0      -> INFINITE
E == max, M[msb] == 1 -> QUIET_NAN
E == max, M[msb] == 0 -> SIGNALING_NAN   (M != 0)
otherwise             -> NORMAL
```

作者: BF16Ops Project
许可: MIT License
"""
from .layout import (FP32_EXPONENT_MASK, FP32_MANTISSA_MASK, FP32_QUIET_BIT,
                     BF16_EXPONENT_MASK, BF16_MANTISSA_MASK, BF16_QUIET_BIT)


class FloatCategory:
    """浮点类别枚举

    Categories returned by ``classify_float32_bits`` / ``classify_bf16_bits``:
    - ZERO: signed zero
    - SUBNORMAL: zero exponent, nonzero mantissa
    - NORMAL: finite, nonzero exponent
    - INFINITE: signed Infinity
    - QUIET_NAN: NaN with the mantissa MSB set
    - SIGNALING_NAN: NaN with the mantissa MSB clear
    """

    ZERO = 'zero'
    SUBNORMAL = 'subnormal'
    NORMAL = 'normal'
    INFINITE = 'infinite'
    QUIET_NAN = 'quiet_nan'
    SIGNALING_NAN = 'signaling_nan'

    @classmethod
    def all(cls):
        return (cls.ZERO, cls.SUBNORMAL, cls.NORMAL, cls.INFINITE,
                cls.QUIET_NAN, cls.SIGNALING_NAN)

    @classmethod
    def is_nan(cls, category):
        """检查类别是否为 NaN (quiet 或 signaling)"""
        return category in (cls.QUIET_NAN, cls.SIGNALING_NAN)

    @classmethod
    def is_finite(cls, category):
        return category in (cls.ZERO, cls.SUBNORMAL, cls.NORMAL)


def _classify(bits, exponent_mask, mantissa_mask, quiet_bit):
    exponent = bits & exponent_mask
    mantissa = bits & mantissa_mask
    if exponent == 0:
        return FloatCategory.ZERO if mantissa == 0 else FloatCategory.SUBNORMAL
    if exponent == exponent_mask:
        if mantissa == 0:
            return FloatCategory.INFINITE
        if bits & quiet_bit:
            return FloatCategory.QUIET_NAN
        return FloatCategory.SIGNALING_NAN
    return FloatCategory.NORMAL


def classify_float32_bits(bits):
    """Classify a 32-bit binary32 pattern.

    Args:
        bits: int in [0, 2^32)

    Returns:
        str: one of the ``FloatCategory`` constants
    """
    return _classify(int(bits), FP32_EXPONENT_MASK, FP32_MANTISSA_MASK, FP32_QUIET_BIT)


def classify_bf16_bits(bits):
    """Classify a 16-bit bfloat16 pattern.

    The result always equals ``classify_float32_bits(bits << 16)``.
    """
    return _classify(int(bits), BF16_EXPONENT_MASK, BF16_MANTISSA_MASK, BF16_QUIET_BIT)
