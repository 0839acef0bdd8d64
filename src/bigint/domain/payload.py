"""
BigIntPayload - сериализуемое представление BigInt

Immutable Pydantic модель для передачи значения через JSON.
Соответствует схеме contracts/schema/bigint_value.json.
Значение сериализуется десятичным текстом (без потери точности).
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from src.bigint.domain.bigint import BigInt

# Текущая версия схемы payload
PAYLOAD_SCHEMA_VERSION = "1"


class BigIntPayload(BaseModel):
    """
    JSON payload с одним arbitrary-precision значением.

    Immutable модель (frozen=True). Поле value принимает int, str
    или BigInt; некорректный текст даёт ValidationError.
    """

    schema_version: Literal["1"] = Field(
        PAYLOAD_SCHEMA_VERSION, description="Версия схемы payload"
    )
    value: BigInt = Field(..., description="Значение, в JSON - десятичный текст")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_value(cls, value: BigInt) -> "BigIntPayload":
        return cls(value=value)

    def to_value(self) -> BigInt:
        """Копия значения"""
        return self.value.copy()

    def to_json_dict(self) -> Dict[str, Any]:
        """Dict для JSON (value как десятичный текст)"""
        return self.model_dump(mode="json")
