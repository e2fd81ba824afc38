"""Pydantic field types for exactnum values.

    from pydantic import BaseModel
    from exactnum.types import NumberField, NumberString

    class Counter(BaseModel):
        total: NumberField          # validated into a Number
        label_value: NumberString   # kept as a canonical decimal string

    Counter(total="1.5E3", label_value="2.50").model_dump()
    # {"total": "1500", "label_value": "2.5"}
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from exactnum.errors import ParseError
from exactnum.number import Number

__all__ = ["NumberField", "NumberString", "to_number", "validate_number_string"]


def to_number(value: Any) -> Number:
    """Validate a field value into a Number.

    Args:
        value: str, int, Decimal or Number

    Returns:
        The value as a Number (Number inputs are returned as-is)

    Raises:
        ValueError: If value is malformed or of an unsupported type
    """
    if isinstance(value, Number):
        return value
    try:
        return Number(value)
    except (ParseError, TypeError) as err:
        raise ValueError(f"Invalid number: {value!r} ({err})") from err


def validate_number_string(value: Any) -> str:
    """Validate a field value and return its canonical decimal string."""
    return to_number(value).to_string()


def _serialize_number(value: Number) -> str:
    return value.to_string()


class _NumberAnnotation:
    """Core schema for Number fields: plain validator plus string serializer."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            to_number,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_number,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


# Number field, serialized as its canonical string
NumberField = Annotated[Number, _NumberAnnotation]

# Decimal literal normalized to its canonical string
NumberString = Annotated[
    str,
    BeforeValidator(validate_number_string),
    Field(description="Decimal number as canonical string"),
]
