"""
procinfo.errors
AUTHOR: carter-vin

Parse failure kinds

- MalformedValue: empty value or bad leading integer
- UnrecognizedUnit: suffix other than kB
- FieldParseError: either of the above, tagged with the originating key
- StreamReadError: the caller's stream failed mid-scan

Every error aborts the whole parse call. No partial snapshots.
"""

from __future__ import annotations

from typing import Optional


class ProcInfoError(Exception):
    """Base class for procinfo parse failures"""


class MalformedValue(ProcInfoError, ValueError):
    def __init__(self, message: str, *, value: str = "") -> None:
        super().__init__(message)
        self.value = value


class UnrecognizedUnit(ProcInfoError, ValueError):
    """
    Second token present but not a supported unit

    unit carries the offending suffix for diagnostics
    """

    def __init__(self, unit: str, *, value: str = "") -> None:
        super().__init__(f"unhandled unit {unit}")
        self.unit = unit
        self.value = value


class FieldParseError(ProcInfoError, ValueError):
    """
    Value conversion failed for a recognized key

    - key: field name as it appeared in the source
    - value: raw (trimmed) value text
    - cause: underlying MalformedValue / UnrecognizedUnit
    """

    def __init__(self, key: str, value: str, cause: Exception) -> None:
        super().__init__(f"failed to parse {key} value of {value!r}: {cause}")
        self.key = key
        self.value = value
        self.cause = cause


class StreamReadError(ProcInfoError, OSError):
    def __init__(self, cause: Optional[BaseException]) -> None:
        super().__init__(f"failed reading stream: {cause}")
        self.cause = cause
