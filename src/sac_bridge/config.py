"""Runtime configuration for SAC macro runs."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXECUTABLE = "/usr/local/sac/bin/sac"
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_POLL_INTERVAL_SECONDS = 0.02


@dataclass(slots=True)
class Settings:
    """Where SAC lives, where workspaces go, and how long to wait for it."""

    executable: str = DEFAULT_EXECUTABLE
    scratch_root: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults matching a stock SAC install."""

        scratch_root = os.getenv("SAC_BRIDGE_SCRATCH_ROOT", "").strip()
        return cls(
            executable=os.getenv("SAC_BRIDGE_EXECUTABLE", DEFAULT_EXECUTABLE).strip(),
            scratch_root=Path(scratch_root) if scratch_root else Path(tempfile.gettempdir()),
            timeout_seconds=_env_float("SAC_BRIDGE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            poll_interval_seconds=_env_float(
                "SAC_BRIDGE_POLL_INTERVAL_SECONDS",
                DEFAULT_POLL_INTERVAL_SECONDS,
            ),
        )

    def validate(self) -> None:
        """Raise configuration error for values the runner cannot honour."""

        if not self.executable:
            raise ValueError("SAC_BRIDGE_EXECUTABLE must not be empty.")
        if self.timeout_seconds <= 0:
            raise ValueError("SAC_BRIDGE_TIMEOUT_SECONDS must be > 0.")
        if self.poll_interval_seconds <= 0:
            raise ValueError("SAC_BRIDGE_POLL_INTERVAL_SECONDS must be > 0.")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ValueError(f"Invalid numeric value for {name}: {value!r}") from error
