"""
procinfo.meminfo
AUTHOR: carter-vin

/proc/meminfo parser
- selected fields land in MemorySnapshot (bytes)
- Buffers/Cached feed the MemAvailable fallback
- everything else is optional passthrough into a caller-supplied dict
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from procinfo.errors import FieldParseError, ProcInfoError
from procinfo.scan import Line, iter_key_values
from procinfo.values import parse_bytes_or_number


@dataclass(frozen=True)
class MemorySnapshot:
    """
    Selected /proc/meminfo fields, all in bytes

    available is always populated: read directly, or estimated
    when the kernel predates MemAvailable
    """

    total: int = 0
    free: int = 0
    available: int = 0
    virtual_total: int = 0
    virtual_free: int = 0


class Slot(Enum):
    """Where a dispatched value is written"""

    FIELD = "field"
    ACCUMULATOR = "accumulator"


# key -> (slot kind, name)
# Keys not listed here are passthrough
DISPATCH: Mapping[str, tuple[Slot, str]] = MappingProxyType(
    {
        "MemTotal": (Slot.FIELD, "total"),
        "MemAvailable": (Slot.FIELD, "available"),
        "MemFree": (Slot.FIELD, "free"),
        "SwapTotal": (Slot.FIELD, "virtual_total"),
        "SwapFree": (Slot.FIELD, "virtual_free"),
        "Buffers": (Slot.ACCUMULATOR, "Buffers"),
        "Cached": (Slot.ACCUMULATOR, "Cached"),
    }
)


def parse_meminfo(
    stream: Iterable[Line],
    other: Optional[dict[str, int]] = None,
) -> MemorySnapshot:
    """
    Parse /proc/meminfo content into a MemorySnapshot

    other:
    - None: unknown keys are skipped without parsing their values
    - dict: receives unknown keys plus Buffers and Cached; written only
      after the whole stream parsed successfully

    Raises FieldParseError on a bad value, StreamReadError on read failure
    """
    fields: dict[str, int] = {}
    accumulators = {"Buffers": 0, "Cached": 0}
    passthrough: dict[str, int] = {}

    for key, value in iter_key_values(stream):
        slot = DISPATCH.get(key)
        if slot is None and other is None:
            continue

        try:
            num = parse_bytes_or_number(value)
        except ProcInfoError as e:
            raise FieldParseError(key, value, e) from e

        if slot is None:
            passthrough[key] = num
            continue

        kind, name = slot
        if kind is Slot.FIELD:
            fields[name] = num
        else:
            accumulators[name] = num

    if "available" not in fields:
        # MemAvailable was added in kernel 3.14. The kernel's own estimator
        # is more involved; this simpler sum is the reported value.
        fields["available"] = (
            fields.get("free", 0) + accumulators["Buffers"] + accumulators["Cached"]
        )

    if other is not None:
        other.update(passthrough)
        other.update(accumulators)

    return MemorySnapshot(**fields)
