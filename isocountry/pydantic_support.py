"""
Pydantic field type for CountryCode.

Usage:
    >>> from pydantic import BaseModel
    >>> class Address(BaseModel):
    ...     country: Country
    >>> Address(country="PL").model_dump_json()
    '{"country":"PL"}'
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from pydantic_core import PydanticCustomError

from .country_codes import CountryCode
from .errors import InvalidCountryValue
from .serialization import deserialize, serialize

EXPECTED = "valid 2 letter country code"


def validate_country(value: Any) -> CountryCode:
    """Accept a CountryCode or its exact alpha-2 string."""
    if isinstance(value, CountryCode):
        return value
    try:
        return deserialize(value)
    except InvalidCountryValue:
        raise PydanticCustomError(
            "invalid_value",
            "Invalid value '{value}', expected {expected}",
            {"value": value, "expected": EXPECTED},
        ) from None


Country = Annotated[
    CountryCode,
    PlainValidator(validate_country),
    PlainSerializer(serialize, return_type=str),
    WithJsonSchema({"type": "string", "enum": [code.value for code in CountryCode]}),
]
