"""
JSON adapter for CountryCode.

A CountryCode is written as exactly its alpha-2 string ("" for UNSPECIFIED)
and read back through parse. The core registry does not depend on this module.
"""

from __future__ import annotations

import json
from typing import Any

from .country_codes import CountryCode
from .errors import InvalidCountryCode, InvalidCountryValue
from .registry import format_code, parse


def serialize(value: CountryCode) -> str:
    """Return the wire form of value."""
    return format_code(value)


def deserialize(data: Any) -> CountryCode:
    """
    Convert a decoded JSON value into a CountryCode.

    Raises:
        InvalidCountryValue: If data is not a string or not a known alpha-2 code.
    """
    if not isinstance(data, str):
        raise InvalidCountryValue(data)
    try:
        return parse(data)
    except InvalidCountryCode as e:
        raise InvalidCountryValue(data) from e


def dumps(value: CountryCode) -> str:
    """Encode value as a JSON string literal, e.g. '"RU"'."""
    return json.dumps(serialize(value))


def loads(text: str | bytes) -> CountryCode:
    """Decode a JSON string literal into a CountryCode."""
    return deserialize(json.loads(text))
