"""
BFloat16 张量解码器 (Tensor Decoder)
====================================

Inverse of ``BFloat16Encoder``. Decoding is exact: the BF16 pattern becomes
the upper half of the FP32 word.

作者: BF16Ops Project
许可: MIT License
"""
import torch
import torch.nn as nn

from .converters import bf16_to_float32, pulse_to_bf16


class BFloat16Decoder(nn.Module):
    """BF16 -> FP32 解码器

    Args:
        input: 'bits' for integer patterns, 'pulse' for [..., 16] bit vectors
    """
    BITS = 'bits'
    PULSE = 'pulse'

    def __init__(self, input=BITS):
        super().__init__()
        if input not in (self.BITS, self.PULSE):
            raise ValueError(f"Invalid input: {input}. Use BFloat16Decoder.BITS or BFloat16Decoder.PULSE")
        self.input = input

    def forward(self, x: torch.Tensor):
        if self.input == self.PULSE:
            x = pulse_to_bf16(x)
        return bf16_to_float32(x)

    def extra_repr(self):
        return f"input={self.input!r}"
