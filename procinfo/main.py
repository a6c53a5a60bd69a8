"""
procinfo.main
------------
AUTHOR: carter-vin

CLI entrypoint
- one snapshot per invocation, printed as a single JSON line
- lifecycle events go through procinfo.logging
- collector failure -> collector_failed event + exit code 1

Key contract:
- `procinfo --help` shows a Commands section.
- `procinfo memory` / `procinfo seccomp` print one JSON snapshot.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import typer

from procinfo import __version__
from procinfo.collectors.base import CollectorOutcome, run_collector
from procinfo.collectors.memory import collect_memory
from procinfo.collectors.seccomp import collect_seccomp
from procinfo.logging import emit_event
from procinfo.model import snapshot_to_json, utc_now_iso

app = typer.Typer(
    add_completion=False,
    help="procinfo: typed host metrics from Linux pseudo-files",
)

TOOL_VERSION = __version__


# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    - help correlate issues across hosts and kernels
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=utc_now_iso(),
    )


def _emit_outcome(outcome: CollectorOutcome, payload_fn) -> None:
    """
    Print the snapshot JSON for a successful outcome, or fail loudly

    Always closes the run with collect_shutdown
    """
    try:
        if not outcome.ok:
            emit_event(
                "collector_failed",
                tool_version=TOOL_VERSION,
                collector=outcome.name,
                error_type=outcome.error_type,
                message=outcome.error_message,
            )
            raise typer.Exit(code=1)

        payload: dict[str, Any] = payload_fn(outcome.value)
        line = snapshot_to_json(payload)
        typer.echo(line)

        emit_event(
            "snapshot_emitted",
            tool_version=TOOL_VERSION,
            collector=outcome.name,
            bytes=len(line),
        )
    finally:
        emit_event(
            "collect_shutdown",
            tool_version=TOOL_VERSION,
            collector=outcome.name,
        )


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Root command behavior.

    If no subcommand is provided, print a short hint and exit 0.
    """
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: procinfo --help")


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print tool version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"procinfo v{TOOL_VERSION}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("memory")
def memory(
    proc_root: Optional[Path] = typer.Option(
        None,
        "--proc-root",
        help="Alternate /proc mount (default: $PROCINFO_PROC_ROOT or /proc).",
    ),
    no_metrics: bool = typer.Option(
        False,
        "--no-metrics",
        help="Drop passthrough fields; report only the named counters.",
    ),
) -> None:
    """
    Read /proc/meminfo once and print a host memory snapshot
    """
    emit_event(
        "collect_start",
        tool_version=TOOL_VERSION,
        collector="memory",
        proc_root=str(proc_root) if proc_root else None,
    )

    outcome = run_collector(
        "memory",
        collect_memory,
        proc_root,
        with_metrics=not no_metrics,
    )
    _emit_outcome(outcome, lambda info: info.to_dict())


@app.command("seccomp")
def seccomp(
    pid: str = typer.Option(
        "self",
        "--pid",
        help="Process to inspect (numeric pid or 'self').",
    ),
    proc_root: Optional[Path] = typer.Option(
        None,
        "--proc-root",
        help="Alternate /proc mount (default: $PROCINFO_PROC_ROOT or /proc).",
    ),
) -> None:
    """
    Read seccomp state from /proc/<pid>/status
    """
    emit_event(
        "collect_start",
        tool_version=TOOL_VERSION,
        collector="seccomp",
        pid=pid,
    )

    outcome = run_collector("seccomp", collect_seccomp, pid, proc_root)
    _emit_outcome(outcome, lambda snap: {"pid": pid, "seccomp": snap.to_dict()})


if __name__ == "__main__":
    app()
