"""
bf16_ops - bfloat16 codec
=========================

Bit-exact conversion between IEEE-754 binary32 and bfloat16
(1 sign / 8 exponent / 7 mantissa bits) for scalars, numpy arrays and torch
tensors.

- ``BFloat16``: value type (encode on construction, exact decode)
- ``bf16_ops.codec``: scalar and numpy codec on raw bit patterns
- ``bf16_ops.encoding``: torch tensor codec and pulse converters
- ``bf16_ops.core``: layout constants, classifier, float32 bit helpers
"""
from .core import (
    FloatCategory, classify_float32_bits, classify_bf16_bits,
    float32_to_bits, bits_to_float32, int_to_float32_bits
)
from .core.finfo import finfo
from .codec import (
    encode_float32_bits, decode_bf16_bits, decode_bf16,
    encode_float32, encode_integer,
    encode_array, decode_array,
    pack_bf16, unpack_bf16
)
from .bfloat16 import BFloat16, get_raw_bits
from .encoding import (
    float32_to_bf16, bf16_to_float32,
    bf16_to_pulse, pulse_to_bf16,
    float32_to_bf16_pulse, bf16_pulse_to_float32,
    BFloat16Encoder, BFloat16Decoder
)

__version__ = "0.1.0"
