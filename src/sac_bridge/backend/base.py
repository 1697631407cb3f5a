"""Launcher interface for starting SAC against a macro."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(slots=True)
class LaunchRequest:
    """Inputs required to start one detached SAC process."""

    executable: str
    macro_path: Path
    workdir: Path
    output_log_path: Path


@dataclass(slots=True)
class LaunchResult:
    """What the launch step returns once SAC runs in the background."""

    pid: int | None
    started_monotonic: float
    output_log_path: Path
    process: subprocess.Popen[bytes] | None = None

    def reap(self, timeout_seconds: float) -> int | None:
        """Collect the exit status of a SAC process that is quitting.

        Only called once the sentinel exists. A process still running after
        ``timeout_seconds`` is left alone; returns its exit code or ``None``.
        """

        if self.process is None:
            return None
        try:
            return self.process.wait(timeout=timeout_seconds)
        except subprocess.TimeoutExpired:
            return None


class SacLauncher(Protocol):
    """Protocol implemented by launchers; must return without waiting for SAC."""

    def launch(self, request: LaunchRequest) -> LaunchResult:
        """Start SAC and return immediately."""
