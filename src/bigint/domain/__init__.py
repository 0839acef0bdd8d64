"""
Domain models and value objects.

Contains the BigInt value type, its mutable binding, and I/O hooks.
"""

from src.bigint.domain.bigint import BigInt, Operand, from_text, to_text
from src.bigint.domain.binding import BigIntVar
from src.bigint.domain.payload import PAYLOAD_SCHEMA_VERSION, BigIntPayload
from src.bigint.domain.streams import read_bigint, read_bigints, write_bigint

__all__ = [
    # Value type
    "BigInt",
    "Operand",
    "from_text",
    "to_text",
    # Mutable binding
    "BigIntVar",
    # Payload model
    "PAYLOAD_SCHEMA_VERSION",
    "BigIntPayload",
    # Streams
    "read_bigint",
    "read_bigints",
    "write_bigint",
]
