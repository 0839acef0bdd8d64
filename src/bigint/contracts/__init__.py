"""
Contract Validation Module

Модуль для валидации JSON контрактов BigInt payload.
"""

from .validators import (
    BigIntValueValidator,
    ContractValidator,
    SchemaLoader,
    dump_bigint_value,
    load_bigint_value,
    validate_bigint_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValueValidator",
    # Functions
    "validate_bigint_value",
    "load_bigint_value",
    "dump_bigint_value",
]
