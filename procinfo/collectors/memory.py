"""
procinfo.collectors.memory
AUTHOR: carter-vin

Memory collector
- Linux only, via <proc>/meminfo
- opens the file; parsing lives in procinfo.meminfo
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from procinfo.collectors.base import proc_root
from procinfo.model import HostMemoryInfo, parse_host_memory_info

MEMINFO_FILE = "meminfo"


def collect_memory(
    root: Optional[Path] = None,
    *,
    with_metrics: bool = True,
) -> HostMemoryInfo:
    """
    Collect host memory from /proc/meminfo

    Raises FileNotFoundError on systems without it; the caller decides
    whether that is fatal
    """
    path = proc_root(root) / MEMINFO_FILE
    with path.open("rb") as handle:
        return parse_host_memory_info(handle, with_metrics=with_metrics)
