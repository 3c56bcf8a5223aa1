"""
BF16 / FP32 位布局常量
======================

bfloat16 is the upper half of an IEEE-754 binary32 word:

```
FP32: [S | E7..E0 | M22..M0], bias=127
BF16: [S | E7..E0 | M6..M0 ], bias=127
```

The exponent field is identical, so the dynamic range is the same; only the
low 16 mantissa bits are dropped.

作者: BF16Ops Project
许可: MIT License
"""

# FP32 fields
FP32_SIGN_MASK = 0x80000000
FP32_EXPONENT_MASK = 0x7F800000
FP32_MANTISSA_MASK = 0x007FFFFF
FP32_QUIET_BIT = 0x00400000
FP32_ALL_BITS = 0xFFFFFFFF

# BF16 fields
BF16_SIGN_MASK = 0x8000
BF16_EXPONENT_MASK = 0x7F80
BF16_MANTISSA_MASK = 0x007F
BF16_QUIET_BIT = 0x0040
BF16_ALL_BITS = 0xFFFF

EXPONENT_BITS = 8
MANTISSA_BITS = 7
EXPONENT_BIAS = 127

# Number of FP32 mantissa bits discarded by the encoder
TRUNCATED_BITS = 16

# Rounding bias: half of the discarded range, minus one. The missing one is
# added back from the retained LSB, which gives ties-to-even.
ROUNDING_BIAS = 0x7FFF

# Canonical BF16 patterns
POSITIVE_ZERO = 0x0000
NEGATIVE_ZERO = 0x8000
POSITIVE_INFINITY = 0x7F80
NEGATIVE_INFINITY = 0xFF80
QUIET_NAN = 0x7FC0
MAX_FINITE = 0x7F7F       # 3.38953139e38
LOWEST_FINITE = 0xFF7F
MIN_NORMAL = 0x0080       # 2^-126, same as FP32
EPSILON = 0x3C00          # 2^-7
ONE = 0x3F80
