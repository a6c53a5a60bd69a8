"""
procinfo.model
AUTHOR: carter-vin

Host-facing memory model + deterministic serialization primitives.

Design goals:
- Explicit structure (no accidental serialization via __dict__)
- available is carried over from the parser, never re-derived
- Stable key order in JSON output
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from procinfo.meminfo import MemorySnapshot, parse_meminfo
from procinfo.scan import Line


def utc_now_iso() -> str:
    """
    Current time in ISO 8601 (UTC)
    """
    return datetime.now(timezone.utc).isoformat()


def _used(total: int, free: int) -> int:
    # total >= free is expected from the kernel but not guaranteed
    return max(0, total - free)


@dataclass(frozen=True)
class HostMemoryInfo:
    """
    Memory snapshot stamped with its collection time

    - used: total - free
    - virtual_used: swap total - swap free
    - metrics: passthrough fields from /proc/meminfo (bytes or counts)
    """

    timestamp: str
    total: int
    used: int
    available: int
    free: int
    virtual_total: int
    virtual_used: int
    virtual_free: int
    metrics: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        # Explicit key mapping for stability
        payload: dict[str, Any] = {
            "timestamp": self.timestamp,
            "total_bytes": self.total,
            "used_bytes": self.used,
            "available_bytes": self.available,
            "free_bytes": self.free,
            "virtual_total_bytes": self.virtual_total,
            "virtual_used_bytes": self.virtual_used,
            "virtual_free_bytes": self.virtual_free,
        }
        if self.metrics:
            payload["metrics"] = dict(self.metrics)  # Shallow copy for safety
        return payload


def build_host_memory_info(
    snapshot: MemorySnapshot,
    metrics: Optional[dict[str, int]] = None,
    *,
    timestamp: Optional[str] = None,
) -> HostMemoryInfo:
    """
    Enrich a parsed snapshot with a timestamp and used counters
    """
    return HostMemoryInfo(
        timestamp=timestamp or utc_now_iso(),
        total=snapshot.total,
        used=_used(snapshot.total, snapshot.free),
        available=snapshot.available,
        free=snapshot.free,
        virtual_total=snapshot.virtual_total,
        virtual_used=_used(snapshot.virtual_total, snapshot.virtual_free),
        virtual_free=snapshot.virtual_free,
        metrics=dict(metrics or {}),
    )


def parse_host_memory_info(
    stream: Iterable[Line],
    *,
    with_metrics: bool = True,
    timestamp: Optional[str] = None,
) -> HostMemoryInfo:
    """
    Parse /proc/meminfo content straight into a HostMemoryInfo
    """
    metrics: Optional[dict[str, int]] = {} if with_metrics else None
    snapshot = parse_meminfo(stream, metrics)
    return build_host_memory_info(snapshot, metrics, timestamp=timestamp)


def snapshot_to_json(payload: dict[str, Any]) -> str:
    """
    Serialize a snapshot payload

    Rules:
    - sort_keys=True ensures stable key order
    - separators remove whitespace to avoid formatting drift
    - ensure_ascii=False keeps UTF-8 readable (passthrough keys are raw)
    """
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
