"""procinfo: typed host metrics from Linux pseudo-files."""

from procinfo.errors import (
    FieldParseError,
    MalformedValue,
    ProcInfoError,
    StreamReadError,
    UnrecognizedUnit,
)
from procinfo.meminfo import MemorySnapshot, parse_meminfo
from procinfo.model import HostMemoryInfo, build_host_memory_info, parse_host_memory_info
from procinfo.seccomp import SeccompMode, SeccompSnapshot, parse_seccomp, read_seccomp_fields
from procinfo.values import parse_bool, parse_bytes_or_number

__version__ = "0.1.0"

__all__ = [
    "FieldParseError",
    "HostMemoryInfo",
    "MalformedValue",
    "MemorySnapshot",
    "ProcInfoError",
    "SeccompMode",
    "SeccompSnapshot",
    "StreamReadError",
    "UnrecognizedUnit",
    "build_host_memory_info",
    "parse_bool",
    "parse_bytes_or_number",
    "parse_host_memory_info",
    "parse_meminfo",
    "parse_seccomp",
    "read_seccomp_fields",
]
