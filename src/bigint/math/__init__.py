"""
Core math modules для bigint

Беззнаковые kernels над magnitudes (base RADIX, LSD first),
comparator и текстовые конвертеры.
"""

# Sign
from src.bigint.math.sign import Sign

# Digit Store & Normalizer
from src.bigint.math.digits import (
    RADIX,
    RADIX_DIGITS,
    magnitude_from_int,
    normalize_magnitude,
    shift_magnitude,
    sign_of_int,
    validate_magnitude,
)

# Comparator
from src.bigint.math.comparator import compare, compare_magnitudes

# Add/Subtract kernels
from src.bigint.math.kernels import (
    KernelInvariantViolation,
    add_magnitudes,
    sub_magnitudes,
)

# Multiplication
from src.bigint.math.multiplication import (
    DEFAULT_MULTIPLICATION_CONFIG,
    KARATSUBA_CUTOFF,
    MIN_KARATSUBA_CUTOFF,
    MultiplicationConfig,
    karatsuba_multiply,
    long_multiply,
    multiply_digit,
    multiply_magnitudes,
)

# Text converters
from src.bigint.math.text import (
    DECIMAL_TEXT_PATTERN,
    InvalidFormat,
    format_decimal,
    is_valid_text_input,
    parse_decimal,
)

__all__ = [
    # Sign
    "Sign",
    # Digit Store - Constants
    "RADIX",
    "RADIX_DIGITS",
    # Digit Store - Functions
    "magnitude_from_int",
    "normalize_magnitude",
    "shift_magnitude",
    "sign_of_int",
    "validate_magnitude",
    # Comparator
    "compare",
    "compare_magnitudes",
    # Kernels - Exceptions
    "KernelInvariantViolation",
    # Kernels - Functions
    "add_magnitudes",
    "sub_magnitudes",
    # Multiplication - Constants
    "DEFAULT_MULTIPLICATION_CONFIG",
    "KARATSUBA_CUTOFF",
    "MIN_KARATSUBA_CUTOFF",
    # Multiplication - Types
    "MultiplicationConfig",
    # Multiplication - Functions
    "karatsuba_multiply",
    "long_multiply",
    "multiply_digit",
    "multiply_magnitudes",
    # Text - Constants
    "DECIMAL_TEXT_PATTERN",
    # Text - Exceptions
    "InvalidFormat",
    # Text - Functions
    "format_decimal",
    "is_valid_text_input",
    "parse_decimal",
]
