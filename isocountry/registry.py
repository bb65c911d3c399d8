"""
Lookups between alpha-2 code strings, English names, numeric codes and CountryCode.

All tables here are built once at import time and never mutated, so every
function is safe to call from any thread.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Dict, Iterator, Optional, Tuple

from .country_codes import CountryCode
from .country_data import COUNTRY_DATA, NAME_ALIASES
from .errors import InvalidCountryCode

# (alpha-2 string, CountryCode) pairs sorted by the string key. The empty key
# maps to CountryCode.UNSPECIFIED.
CODE_TABLE: Tuple[Tuple[str, CountryCode], ...] = tuple(
    sorted((code.value, code) for code in CountryCode)
)
_CODE_KEYS: Tuple[str, ...] = tuple(key for key, _ in CODE_TABLE)

# Full English name (or recognized alias) -> CountryCode
NAME_TABLE: Dict[str, CountryCode] = {
    name: code for code, (_, name) in COUNTRY_DATA.items() if code is not CountryCode.UNSPECIFIED
}
NAME_TABLE.update(NAME_ALIASES)


def parse(code: str) -> CountryCode:
    """
    Look up a CountryCode by its exact alpha-2 string.

    Matching is byte-for-byte: no trimming and no case folding. The empty
    string resolves to CountryCode.UNSPECIFIED.

    Raises:
        InvalidCountryCode: If code is not a key of CODE_TABLE.
    """
    if isinstance(code, str):
        pos = bisect_left(_CODE_KEYS, code)
        if pos < len(_CODE_KEYS) and _CODE_KEYS[pos] == code:
            return CODE_TABLE[pos][1]
    raise InvalidCountryCode(code)


def format_code(value: CountryCode) -> str:
    """Return the alpha-2 string for value ("" for UNSPECIFIED)."""
    return CountryCode(value).value


def country_name(value: CountryCode) -> str:
    """Return the English short name for value ("" for UNSPECIFIED)."""
    return COUNTRY_DATA[CountryCode(value)][1]


def numeric_code(value: CountryCode) -> int:
    """Return the ISO 3166-1 numeric code for value (0 for UNSPECIFIED)."""
    return COUNTRY_DATA[CountryCode(value)][0]


def from_name(name: str) -> Optional[CountryCode]:
    """Exact, case-sensitive lookup by English name or alias; None if unknown."""
    return NAME_TABLE.get(name)


def iter_countries(include_unspecified: bool = False) -> Iterator[CountryCode]:
    """Yield every CountryCode in code order."""
    for key, code in CODE_TABLE:
        if key or include_unspecified:
            yield code
