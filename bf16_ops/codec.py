"""
BF16 编解码器 (Encoder / Decoder)
=================================

FP32 → BF16 encoding and BF16 → FP32 decoding on raw bit patterns, with
numpy-vectorised counterparts for arrays.

编码规则 (FP32 → BF16)
----------------------

```
Inf       -> signed Inf                    (0x7f80 / 0xff80)
NaN       -> (bits >> 16) | 0x0040         quiet bit forced, sign kept
Subnormal -> signed zero                   flush-to-zero
Zero      -> signed zero
Normal    -> (bits + 0x7fff + lsb) >> 16   round to nearest, ties to even
             lsb = bit 16 of the FP32 pattern (the retained mantissa LSB)
```

The rounding add may carry out of the mantissa into the exponent. A carry
into exponent 0xff with a zero mantissa is exactly Infinity, so values above
the largest finite bfloat16 (3.38953139e38) overflow to Infinity, including
``±FLT_MAX``.

解码规则 (BF16 → FP32)
----------------------

``bits << 16``. The BF16 layout is the upper half of the FP32 layout, so
decoding is exact and never branches.

使用示例
--------
```python
from bf16_ops.codec import encode_float32, decode_bf16, encode_array

encode_float32(1.0)                  # 0x3f80
decode_bf16(0x3f80)                  # np.float32(1.0)
encode_array(np.ones(4, np.float32))  # array([16256, ...], dtype=uint16)
```

作者: BF16Ops Project
许可: MIT License
"""
import logging

import numpy as np

from .core.bits import float32_to_bits, bits_to_float32, int_to_float32_bits
from .core.layout import (FP32_EXPONENT_MASK, FP32_MANTISSA_MASK, FP32_QUIET_BIT,
                          FP32_ALL_BITS, BF16_SIGN_MASK, BF16_QUIET_BIT,
                          BF16_ALL_BITS, ROUNDING_BIAS, TRUNCATED_BITS)

logger = logging.getLogger(__name__)

BYTE_ORDERS = ('<', '>')


# ==============================================================================
# Scalar codec
# ==============================================================================

def encode_float32_bits(bits):
    """Encode a 32-bit binary32 pattern into a 16-bit bfloat16 pattern.

    Total on [0, 2^32): every pattern has a defined encoding.

    Args:
        bits: int, FP32 bit pattern

    Returns:
        int: BF16 bit pattern in [0, 2^16)
    """
    bits = int(bits) & FP32_ALL_BITS
    exponent = bits & FP32_EXPONENT_MASK
    upper = bits >> TRUNCATED_BITS

    if exponent == FP32_EXPONENT_MASK:
        if bits & FP32_MANTISSA_MASK:
            # NaN: keep sign and the upper payload bits, force the quiet bit
            return upper | BF16_QUIET_BIT
        return upper

    if exponent == 0:
        # Zero and subnormal both become signed zero
        return upper & BF16_SIGN_MASK

    lsb = upper & 1
    return (bits + ROUNDING_BIAS + lsb) >> TRUNCATED_BITS


def decode_bf16_bits(bits):
    """Return the FP32 bit pattern that the BF16 pattern ``bits`` denotes."""
    return (int(bits) & BF16_ALL_BITS) << TRUNCATED_BITS


def decode_bf16(bits):
    """Decode a BF16 pattern to ``np.float32`` (exact, NaN payload kept)."""
    return bits_to_float32(decode_bf16_bits(bits))


def encode_float32(value):
    """Encode a real number; non-float32 input is first cast to float32.

    Integers are rounded straight to float32, so ``encode_float32(n)`` equals
    ``encode_integer(n)`` for every int, however large.
    """
    return encode_float32_bits(float32_to_bits(value))


def encode_integer(value):
    """Encode an integer as ``encode_float32(float32(value))``."""
    return encode_float32_bits(int_to_float32_bits(value))


# ==============================================================================
# Vectorised codec (numpy)
# ==============================================================================

def _as_float32_array(values):
    arr = np.asarray(values)
    if arr.dtype.kind in 'biu':
        return arr.astype(np.float32)
    if arr.dtype.kind == 'f':
        if arr.dtype == np.float32:
            return arr
        with np.errstate(over='ignore'):
            return arr.astype(np.float32)
    raise TypeError(f"Expected a real-valued array, got dtype {arr.dtype}")


def encode_array(values):
    """Encode an array of numbers into BF16 patterns.

    Elementwise identical to ``encode_float32_bits``. Float inputs of other
    widths are cast to float32 first; integer arrays use numpy's
    integer→float32 cast.

    Args:
        values: array-like of real numbers, any shape

    Returns:
        np.ndarray: uint16 array of the same shape
    """
    f32 = _as_float32_array(values)
    bits = f32.view(np.uint32).astype(np.uint64)

    exponent = bits & FP32_EXPONENT_MASK
    mantissa = bits & FP32_MANTISSA_MASK
    upper = bits >> TRUNCATED_BITS

    rounded = (bits + ROUNDING_BIAS + (upper & 1)) >> TRUNCATED_BITS
    is_special = exponent == FP32_EXPONENT_MASK
    is_nan = is_special & (mantissa != 0)
    is_denorm_or_zero = exponent == 0

    out = np.where(is_denorm_or_zero, upper & BF16_SIGN_MASK, rounded)
    out = np.where(is_special, upper, out)
    out = np.where(is_nan, upper | BF16_QUIET_BIT, out)

    if logger.isEnabledFor(logging.DEBUG):
        flushed = int(np.count_nonzero(is_denorm_or_zero & (mantissa != 0)))
        quieted = int(np.count_nonzero(is_nan & ((bits & FP32_QUIET_BIT) == 0)))
        logger.debug("encode_array: %d values, %d subnormals flushed, %d signaling NaNs quieted",
                     out.size, flushed, quieted)

    return out.astype(np.uint16)


def decode_array(bits):
    """Decode an array of BF16 patterns into a float32 array (exact)."""
    arr = np.asarray(bits)
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"Expected an integer array of BF16 patterns, got dtype {arr.dtype}")
    wide = (arr.astype(np.uint32) & BF16_ALL_BITS) << TRUNCATED_BITS
    return wide.view(np.float32)


# ==============================================================================
# Byte packing for storage layers
# ==============================================================================

def _check_byteorder(byteorder):
    if byteorder not in BYTE_ORDERS:
        raise ValueError(f"Invalid byteorder: {byteorder!r}. Use '<' (little) or '>' (big)")


def pack_bf16(bits, byteorder='<'):
    """Pack BF16 patterns contiguously, two bytes each.

    Args:
        bits: array-like of BF16 patterns
        byteorder: '<' little-endian or '>' big-endian

    Returns:
        bytes
    """
    _check_byteorder(byteorder)
    arr = np.asarray(bits)
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"Expected an integer array of BF16 patterns, got dtype {arr.dtype}")
    return (arr.astype(np.uint32) & BF16_ALL_BITS).astype(byteorder + 'u2').tobytes()


def unpack_bf16(buffer, byteorder='<'):
    """Inverse of ``pack_bf16``; returns a flat native-order uint16 array."""
    _check_byteorder(byteorder)
    if len(buffer) % 2:
        raise ValueError(f"Buffer length must be a multiple of 2, got {len(buffer)}")
    return np.frombuffer(buffer, dtype=byteorder + 'u2').astype(np.uint16)
