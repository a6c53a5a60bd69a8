"""procinfo.collectors package exports."""

from procinfo.collectors.base import CollectorOutcome, proc_root, run_collector
from procinfo.collectors.memory import collect_memory
from procinfo.collectors.seccomp import collect_seccomp

__all__ = [
    "CollectorOutcome",
    "collect_memory",
    "collect_seccomp",
    "proc_root",
    "run_collector",
]
