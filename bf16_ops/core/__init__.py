"""
Core components - Layout constants, bit reinterpretation and classification
"""
from .layout import *
from .bits import float32_to_bits, bits_to_float32, int_to_float32_bits
from .classify import FloatCategory, classify_float32_bits, classify_bf16_bits
