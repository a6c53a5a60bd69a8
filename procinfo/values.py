"""
procinfo.values
AUTHOR: carter-vin

Field value parsing
- no knowledge of field semantics
- numbers are base-10, unsigned, 64-bit
- the only unit is "kB" (1024 bytes)
"""

from __future__ import annotations

import re

from procinfo.errors import MalformedValue, UnrecognizedUnit

UINT64_MAX = (1 << 64) - 1

# Unit suffix -> multiplier
UNIT_MULTIPLIERS = {
    "kB": 1024,
}

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

# ASCII digits only: int() alone would accept "+5", "1_000" and non-ASCII digits
_UINT_RE = re.compile(r"[0-9]+")


def parse_uint(token: str, bits: int = 64) -> int:
    """
    Parse a base-10 unsigned integer bounded to the given bit width
    """
    if not _UINT_RE.fullmatch(token):
        raise MalformedValue(f"invalid unsigned integer {token!r}", value=token)

    try:
        num = int(token, 10)
    except ValueError as e:
        raise MalformedValue(f"invalid unsigned integer {token!r}", value=token) from e

    if num >= 1 << bits:
        raise MalformedValue(f"value {token} out of range for uint{bits}", value=token)
    return num


def parse_bytes_or_number(value: str) -> int:
    """
    Convert "<N>" or "<N> kB" into an integer

    - bare number: returned unchanged (counts, flags)
    - "kB" suffix: scaled to bytes
    - extra tokens after the unit are ignored

    Raises MalformedValue / UnrecognizedUnit
    """
    parts = value.split()
    if not parts:
        raise MalformedValue("empty value", value=value)

    try:
        num = parse_uint(parts[0])
    except MalformedValue as e:
        raise MalformedValue(f"failed to parse value: {e}", value=value) from e

    multiplier = 1
    if len(parts) >= 2:
        unit = parts[1]
        if unit not in UNIT_MULTIPLIERS:
            raise UnrecognizedUnit(unit, value=value)
        multiplier = UNIT_MULTIPLIERS[unit]

    result = num * multiplier
    if result > UINT64_MAX:
        raise MalformedValue(f"value {value!r} overflows 64 bits", value=value)
    return result


def parse_bool(value: str) -> bool:
    """
    Parse a truthy/falsy flag ("1"/"0", "true"/"false", "t"/"f")
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise MalformedValue(f"invalid boolean {value!r}", value=value)
