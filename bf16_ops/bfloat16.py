"""
BFloat16 数值类型
=================

A 16-bit truncated float: the upper half of an IEEE-754 binary32, with the
same 8-bit exponent and a 7-bit mantissa.

构造方式
--------

```
BFloat16(1.5)                    # float  -> float32 -> encoder
BFloat16(np.float32(1.5))        # float32 bits -> encoder (NaN payload kept)
BFloat16(300)                    # int    -> float32 (RNE) -> encoder
BFloat16.from_raw_bits(0x7f81)   # raw pattern, stored unchecked
```

Construction from an integer is bit-identical to construction from
``np.float32(value)``. ``assign`` runs the same construction path, so
``b.assign(v)`` always yields the raw bits of ``BFloat16(v)``.

``float(b)`` and the comparison operators go through the decoded float32;
raw pattern equality is ``a.raw_bits == b.raw_bits``.

使用示例
--------
```python
from bf16_ops import BFloat16, get_raw_bits

b = BFloat16(3.14159)
float(b)           # 3.140625
get_raw_bits(b)    # 0x4049

b.assign(-2)
b.raw_bits         # 0xc000
```

作者: BF16Ops Project
许可: MIT License
"""
import numbers

import numpy as np

from .codec import encode_float32_bits, decode_bf16_bits
from .core.bits import float32_to_bits, bits_to_float32, int_to_float32_bits
from .core.classify import FloatCategory, classify_bf16_bits
from .core.layout import BF16_ALL_BITS, BF16_SIGN_MASK


def _encode_value(value):
    """Shared construction/assignment path: any real number -> BF16 bits."""
    if isinstance(value, BFloat16):
        return value._bits
    if isinstance(value, (bool, np.bool_, numbers.Integral, np.integer)):
        return encode_float32_bits(int_to_float32_bits(value))
    return encode_float32_bits(float32_to_bits(value))


class BFloat16:
    """bfloat16 数值 (value type)

    Holds a single 16-bit pattern. Instances compare and convert like the
    float32 they decode to. They are mutable and therefore unhashable.

    Args:
        value: float, np.floating, int, np.integer, bool or BFloat16.
            Defaults to +0.0.

    Raises:
        TypeError: if ``value`` is not a real number
    """
    __slots__ = ('_bits',)

    def __init__(self, value=0.0):
        self._bits = _encode_value(value)

    @classmethod
    def from_raw_bits(cls, bits):
        """Construct from a 16-bit pattern without validation.

        The pattern is stored as given (reduced to 16 bits). It is the only
        way to hold a signaling NaN; re-encoding its decoded value quiets it.
        """
        obj = cls.__new__(cls)
        obj._bits = int(bits) & BF16_ALL_BITS
        return obj

    def assign(self, value):
        """In-place assignment; same result as ``BFloat16(value)``."""
        self._bits = _encode_value(value)
        return self

    @property
    def raw_bits(self):
        return self._bits

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_float32_bits(self):
        return decode_bf16_bits(self._bits)

    def to_float32(self):
        """Decode to ``np.float32`` built from the bit pattern."""
        return bits_to_float32(decode_bf16_bits(self._bits))

    def __float__(self):
        return float(self.to_float32())

    def __bool__(self):
        return float(self) != 0.0

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def category(self):
        return classify_bf16_bits(self._bits)

    def is_nan(self):
        return FloatCategory.is_nan(self.category())

    def is_signaling_nan(self):
        return self.category() == FloatCategory.SIGNALING_NAN

    def is_inf(self):
        return self.category() == FloatCategory.INFINITE

    def is_zero(self):
        return self.category() == FloatCategory.ZERO

    def is_subnormal(self):
        return self.category() == FloatCategory.SUBNORMAL

    def is_finite(self):
        return FloatCategory.is_finite(self.category())

    def signbit(self):
        return bool(self._bits & BF16_SIGN_MASK)

    # ------------------------------------------------------------------
    # Comparison (through the decoded value)
    # ------------------------------------------------------------------

    def _operand(self, other):
        if isinstance(other, BFloat16):
            return float(other)
        if isinstance(other, (numbers.Real, np.number)) and not isinstance(other, np.complexfloating):
            return other
        return NotImplemented

    def __eq__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) == other

    def __ne__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) != other

    def __lt__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) < other

    def __le__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) <= other

    def __gt__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) > other

    def __ge__(self, other):
        other = self._operand(other)
        if other is NotImplemented:
            return other
        return float(self) >= other

    # Mutable through assign(), so not hashable
    __hash__ = None

    # ------------------------------------------------------------------
    # Copy / pickle / repr
    # ------------------------------------------------------------------

    def __copy__(self):
        return type(self).from_raw_bits(self._bits)

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __reduce__(self):
        return (type(self).from_raw_bits, (self._bits,))

    def __repr__(self):
        return f"BFloat16({float(self)!r}, raw_bits=0x{self._bits:04x})"

    def __str__(self):
        return str(float(self))


def get_raw_bits(value):
    """Return the 16-bit pattern of a ``BFloat16`` (for persistence)."""
    return value.raw_bits
