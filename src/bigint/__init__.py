"""
Arbitrary-precision signed integer arithmetic.

Numeric core без внешних систем: digit store (base RADIX), kernels
сложения/вычитания/умножения, comparator, текстовые конвертеры.
"""

from src.bigint.domain import BigInt, BigIntVar, from_text, to_text
from src.bigint.math import InvalidFormat, KernelInvariantViolation, MultiplicationConfig, Sign

__all__ = [
    "BigInt",
    "BigIntVar",
    "InvalidFormat",
    "KernelInvariantViolation",
    "MultiplicationConfig",
    "Sign",
    "from_text",
    "to_text",
]
