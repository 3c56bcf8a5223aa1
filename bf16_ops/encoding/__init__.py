"""
Encoding/Decoding components - Tensor <-> BF16 bits <-> Pulse conversion
"""
from .converters import (
    float32_to_bf16, bf16_to_float32,
    bf16_to_pulse, pulse_to_bf16,
    float32_to_bf16_pulse, bf16_pulse_to_float32
)
from .floating_point import BFloat16Encoder
from .pulse_decoder import BFloat16Decoder
