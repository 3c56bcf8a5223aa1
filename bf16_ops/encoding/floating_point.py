"""
BFloat16 张量编码器 (Tensor Encoder)
====================================

``nn.Module`` wrapper around ``float32_to_bf16`` so the codec can sit inside
a model or a data pipeline and follow it across devices.

使用示例
--------
```python
encoder = BFloat16Encoder().to(device)
bits = encoder(x)                  # int32 [batch, ...]

pulse_encoder = BFloat16Encoder(output='pulse')
pulse = pulse_encoder(x)           # float [batch, ..., 16]
```

作者: BF16Ops Project
许可: MIT License
"""
import torch
import torch.nn as nn

from .converters import float32_to_bf16, bf16_to_pulse


class BFloat16Encoder(nn.Module):
    """FP32 -> BF16 编码器

    Round to nearest even, subnormals flushed to signed zero, NaNs quieted.

    Args:
        output: 'bits' for int32 patterns, 'pulse' for [..., 16] bit vectors

    Raises:
        ValueError: if ``output`` is not a valid output format
    """
    BITS = 'bits'
    PULSE = 'pulse'

    def __init__(self, output=BITS):
        super().__init__()
        if output not in (self.BITS, self.PULSE):
            raise ValueError(f"Invalid output: {output}. Use BFloat16Encoder.BITS or BFloat16Encoder.PULSE")
        self.output = output

    def forward(self, x: torch.Tensor):
        bits = float32_to_bf16(x)
        if self.output == self.PULSE:
            return bf16_to_pulse(bits)
        return bits

    def extra_repr(self):
        return f"output={self.output!r}"
