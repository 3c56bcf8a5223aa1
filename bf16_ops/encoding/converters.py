"""
张量转换函数 - Float32 <-> BF16 bits <-> Pulse
==============================================

Functional tensor codec. Every function is elementwise identical to the
scalar codec in ``bf16_ops.codec``.

脉冲格式 (Pulse format)
-----------------------

A BF16 pattern as a float tensor of 0/1, MSB first:

```
pulse[..., 0]     = S
pulse[..., 1:9]   = E7..E0
pulse[..., 9:16]  = M6..M0
```

作者: BF16Ops Project
许可: MIT License
"""
import logging

import torch

from ..core.layout import (FP32_EXPONENT_MASK, FP32_MANTISSA_MASK, FP32_QUIET_BIT,
                           FP32_ALL_BITS, BF16_SIGN_MASK, BF16_QUIET_BIT,
                           BF16_ALL_BITS, ROUNDING_BIAS, TRUNCATED_BITS)

logger = logging.getLogger(__name__)

PULSE_BITS = 16


def _tensor_to_bits(x):
    """float32 tensor -> int64 tensor of unsigned FP32 patterns"""
    if x.dtype != torch.float32:
        x = x.to(torch.float32)
    return x.view(torch.int32).to(torch.int64) & FP32_ALL_BITS


def _bits_to_tensor(bits):
    """int tensor of unsigned FP32 patterns -> float32 tensor"""
    bits = bits.to(torch.int64) & FP32_ALL_BITS
    signed = torch.where(bits >= 2 ** 31, bits - 2 ** 32, bits)
    return signed.to(torch.int32).view(torch.float32)


def float32_to_bf16(x):
    """Encode a tensor to BF16 patterns.

    Args:
        x: tensor of any real dtype; non-float32 is cast to float32 first

    Returns:
        int32 tensor of BF16 patterns in [0, 2^16), same shape and device
    """
    bits = _tensor_to_bits(x)

    exponent = bits & FP32_EXPONENT_MASK
    mantissa = bits & FP32_MANTISSA_MASK
    upper = bits >> TRUNCATED_BITS

    # Round to nearest, ties to even
    rounded = (bits + ROUNDING_BIAS + (upper & 1)) >> TRUNCATED_BITS
    is_special = exponent == FP32_EXPONENT_MASK
    is_nan = is_special & (mantissa != 0)
    is_denorm_or_zero = exponent == 0

    out = torch.where(is_denorm_or_zero, upper & BF16_SIGN_MASK, rounded)
    out = torch.where(is_special, upper, out)
    out = torch.where(is_nan, upper | BF16_QUIET_BIT, out)

    if logger.isEnabledFor(logging.DEBUG):
        flushed = int((is_denorm_or_zero & (mantissa != 0)).sum().item())
        quieted = int((is_nan & ((bits & FP32_QUIET_BIT) == 0)).sum().item())
        logger.debug("float32_to_bf16: %d values, %d subnormals flushed, %d signaling NaNs quieted",
                     out.numel(), flushed, quieted)

    return out.to(torch.int32)


def bf16_to_float32(bits):
    """Decode a tensor of BF16 patterns to float32 (exact)."""
    if bits.is_floating_point():
        raise TypeError(f"Expected an integer tensor of BF16 patterns, got {bits.dtype}")
    wide = (bits.to(torch.int64) & BF16_ALL_BITS) << TRUNCATED_BITS
    return _bits_to_tensor(wide)


def bf16_to_pulse(bits):
    """BF16 patterns [...] -> pulse [..., 16] (MSB first)"""
    shifts = torch.arange(PULSE_BITS - 1, -1, -1, device=bits.device)
    wide = bits.to(torch.int64).unsqueeze(-1) & BF16_ALL_BITS
    return ((wide >> shifts) & 1).to(torch.float32)


def pulse_to_bf16(pulse):
    """Pulse [..., 16] (MSB first) -> int32 BF16 patterns [...]

    Raises:
        ValueError: if the last dimension is not 16
    """
    if pulse.dim() == 0 or pulse.shape[-1] != PULSE_BITS:
        raise ValueError(f"Expected pulse with last dimension {PULSE_BITS}, got shape {tuple(pulse.shape)}")
    shifts = torch.arange(PULSE_BITS - 1, -1, -1, device=pulse.device)
    bit_values = (pulse > 0.5).to(torch.int64)
    return (bit_values << shifts).sum(dim=-1).to(torch.int32)


def float32_to_bf16_pulse(x):
    """float tensor [...] -> BF16 pulse [..., 16]"""
    return bf16_to_pulse(float32_to_bf16(x))


def bf16_pulse_to_float32(pulse):
    """BF16 pulse [..., 16] -> float32 tensor [...]"""
    return bf16_to_float32(pulse_to_bf16(pulse))
