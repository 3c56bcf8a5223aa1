import os
import sys

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bf16_ops import FloatCategory, classify_float32_bits, classify_bf16_bits, BFloat16, finfo
from bf16_ops.core import layout


def test_float32_categories():
    cases = {
        0x00000000: FloatCategory.ZERO,
        0x80000000: FloatCategory.ZERO,
        0x00000001: FloatCategory.SUBNORMAL,
        0x807FFFFF: FloatCategory.SUBNORMAL,
        0x00800000: FloatCategory.NORMAL,
        0x3F800000: FloatCategory.NORMAL,
        0xFF7FFFFF: FloatCategory.NORMAL,
        0x7F800000: FloatCategory.INFINITE,
        0xFF800000: FloatCategory.INFINITE,
        0x7FC00000: FloatCategory.QUIET_NAN,
        0xFFFFFFFF: FloatCategory.QUIET_NAN,
        0x7F800001: FloatCategory.SIGNALING_NAN,
        0xFFBFFFFF: FloatCategory.SIGNALING_NAN,
    }
    for bits, expected in cases.items():
        assert classify_float32_bits(bits) == expected, hex(bits)
    print("FP32 classification: PASS")


def test_bf16_classification_matches_float32_of_decoded_pattern():
    for bits in range(1 << 16):
        assert classify_bf16_bits(bits) == classify_float32_bits(bits << 16), hex(bits)
    print("BF16 classification (65536 patterns): PASS")


def test_category_helpers():
    assert FloatCategory.is_nan(FloatCategory.QUIET_NAN)
    assert FloatCategory.is_nan(FloatCategory.SIGNALING_NAN)
    assert not FloatCategory.is_nan(FloatCategory.INFINITE)
    assert FloatCategory.is_finite(FloatCategory.SUBNORMAL)
    assert not FloatCategory.is_finite(FloatCategory.INFINITE)
    assert len(set(FloatCategory.all())) == 6


def test_bfloat16_predicates():
    assert BFloat16(0.0).is_zero()
    assert BFloat16(float('inf')).is_inf()
    assert BFloat16(float('nan')).is_nan()
    assert BFloat16.from_raw_bits(0x0001).is_subnormal()
    assert BFloat16.from_raw_bits(0xFF81).is_signaling_nan()
    assert BFloat16(-1.0).signbit()
    assert BFloat16(1.0).category() == FloatCategory.NORMAL


def test_finfo():
    assert finfo.bits == 16
    assert finfo.nexp == 8 and finfo.nmant == 7
    assert finfo.max == np.float32(3.38953139e38)
    assert finfo.min == -finfo.max
    assert finfo.tiny == np.finfo(np.float32).tiny
    assert finfo.eps == np.float32(0.0078125)
    assert BFloat16(finfo.max).raw_bits == layout.MAX_FINITE
    assert BFloat16(finfo.eps).raw_bits == layout.EPSILON

    # Canonical patterns
    assert BFloat16(0.0).raw_bits == layout.POSITIVE_ZERO
    assert BFloat16(-0.0).raw_bits == layout.NEGATIVE_ZERO
    assert BFloat16(float("inf")).raw_bits == layout.POSITIVE_INFINITY
    assert BFloat16(float("-inf")).raw_bits == layout.NEGATIVE_INFINITY
    assert BFloat16(float("nan")).raw_bits == layout.QUIET_NAN
    assert BFloat16(-finfo.max).raw_bits == layout.LOWEST_FINITE
    assert BFloat16(finfo.smallest_normal).raw_bits == layout.MIN_NORMAL
    assert BFloat16(1).raw_bits == layout.ONE
    assert classify_bf16_bits(layout.QUIET_NAN) == FloatCategory.QUIET_NAN
    assert classify_bf16_bits(layout.MIN_NORMAL) == FloatCategory.NORMAL
    assert classify_bf16_bits(layout.NEGATIVE_INFINITY) == FloatCategory.INFINITE


if __name__ == "__main__":
    test_float32_categories()
    test_bf16_classification_matches_float32_of_decoded_pattern()
    test_category_helpers()
    test_bfloat16_predicates()
    test_finfo()
    print("\nALL CLASSIFY TESTS PASSED.")
