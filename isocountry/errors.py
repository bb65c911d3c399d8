"""
Errors raised when converting text into CountryCode values.
"""

from __future__ import annotations


class InvalidCountryCode(ValueError):
    """Raised by parse when a string is not an exact alpha-2 table key."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"error parsing country code: {code!r}")


class InvalidCountryValue(ValueError):
    """
    Raised when decoding serialized data that does not hold a known code.

    Attributes:
        value: The rejected input, verbatim.
        expected: What a valid input looks like.
    """

    def __init__(self, value: object, expected: str = "valid 2 letter country code") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"invalid value {value!r}, expected {expected}")
