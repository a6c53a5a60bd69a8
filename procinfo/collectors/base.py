"""
procinfo.collectors.base
AUTHOR: carter-vin

Light result wrapper -> prevent collector errors from crashing the CLI
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_PROC_ROOT = Path("/proc")

# Env var override is important for:
# - pointing tests at a fake /proc tree
# - containers that mount the host /proc elsewhere
PROC_ROOT_ENV = "PROCINFO_PROC_ROOT"


def proc_root(override: Optional[Path] = None) -> Path:
    """
    Resolve the /proc mount

    Precedence: explicit override, then PROCINFO_PROC_ROOT, then /proc
    """
    if override is not None:
        return Path(override)
    env_root = os.getenv(PROC_ROOT_ENV)
    if env_root:
        return Path(env_root)
    return DEFAULT_PROC_ROOT


@dataclass(frozen=True)
class CollectorOutcome:
    """
    Normalized collector result
    - ok: false=failure, error details in error field
    - value: collector result object if ok=true
    """

    name: str
    ok: bool
    value: Optional[Any] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None


def run_collector(name: str, fn, *args, **kwargs) -> CollectorOutcome:
    """
    Run collector & collect failure as data
    """
    try:
        v = fn(*args, **kwargs)
        return CollectorOutcome(name=name, ok=True, value=v)
    except Exception as e:
        return CollectorOutcome(
            name=name,
            ok=False,
            value=None,
            error_type=type(e).__name__,
            error_message=str(e),
        )
