"""
Shared fixtures: sample pseudo-file content and a fake /proc tree
"""

from pathlib import Path

import pytest

MEMINFO_MODERN = """\
MemTotal:       16318412 kB
MemFree:         2412312 kB
MemAvailable:    9875432 kB
Buffers:          412876 kB
Cached:          6543210 kB
SwapCached:            0 kB
SwapTotal:       8388604 kB
SwapFree:        8388604 kB
VmallocChunk:          0 kB
HugePages_Total:       0
Hugepagesize:       2048 kB
"""

STATUS_SELF = """\
Name:\tpython3
Umask:\t0022
State:\tR (running)
Pid:\t4242
NoNewPrivs:\t1
Seccomp:\t2
Seccomp_filters:\t1
Speculation_Store_Bypass:\tthread vulnerable
"""


@pytest.fixture
def fake_proc(tmp_path: Path) -> Path:
    """
    Minimal /proc tree with meminfo and self/status
    """
    root = tmp_path / "proc"
    (root / "self").mkdir(parents=True)
    (root / "meminfo").write_text(MEMINFO_MODERN, encoding="utf-8")
    (root / "self" / "status").write_text(STATUS_SELF, encoding="utf-8")
    return root
