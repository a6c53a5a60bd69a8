"""
procinfo.seccomp
AUTHOR: carter-vin

Seccomp fields from /proc/<pid>/status
- Seccomp: mode code -> "disabled" | "strict" | "filter" | "<code>"
- NoNewPrivs: optional flag, None when the kernel does not report it
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Optional

from procinfo.errors import FieldParseError, ProcInfoError
from procinfo.scan import Line, iter_key_values
from procinfo.values import parse_bool, parse_uint


class SeccompMode(IntEnum):
    DISABLED = 0
    STRICT = 1
    FILTER = 2


def seccomp_mode_name(code: int) -> str:
    """
    Name for a seccomp mode code

    Unknown codes fall back to their decimal form so newer kernels
    do not break parsing
    """
    try:
        return SeccompMode(code).name.lower()
    except ValueError:
        return str(code)


@dataclass(frozen=True)
class SeccompSnapshot:
    mode: str = ""
    no_new_privs: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"mode": self.mode}
        # Absent is not the same as false
        if self.no_new_privs is not None:
            payload["no_new_privs"] = self.no_new_privs
        return payload


def parse_seccomp(stream: Iterable[Line]) -> SeccompSnapshot:
    """
    Parse the seccomp-related lines of a status file

    Unknown keys are ignored. Raises FieldParseError on a bad value.
    """
    mode = ""
    no_new_privs: Optional[bool] = None

    for key, value in iter_key_values(stream, ":", trim_key=True):
        try:
            if key == "Seccomp":
                mode = seccomp_mode_name(parse_uint(value, bits=8))
            elif key == "NoNewPrivs":
                no_new_privs = parse_bool(value)
        except ProcInfoError as e:
            raise FieldParseError(key, value, e) from e

    return SeccompSnapshot(mode=mode, no_new_privs=no_new_privs)


def read_seccomp_fields(content: bytes) -> SeccompSnapshot:
    return parse_seccomp(io.BytesIO(content))
