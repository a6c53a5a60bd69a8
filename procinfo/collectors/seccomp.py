"""
procinfo.collectors.seccomp
AUTHOR: carter-vin

Seccomp collector for a single process (default: self)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from procinfo.collectors.base import proc_root
from procinfo.seccomp import SeccompSnapshot, parse_seccomp


def collect_seccomp(pid: str = "self", root: Optional[Path] = None) -> SeccompSnapshot:
    path = proc_root(root) / str(pid) / "status"
    with path.open("rb") as handle:
        return parse_seccomp(handle)
