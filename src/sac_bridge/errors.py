"""Error taxonomy for SAC macro runs."""

from __future__ import annotations


class SacBridgeError(Exception):
    """Base error for one failed SAC run, tagged with the failing phase."""

    phase = "run"

    def __init__(self, message: str, *, phase: str | None = None) -> None:
        super().__init__(message)
        if phase is not None:
            self.phase = phase


class InvalidArgumentError(SacBridgeError, ValueError):
    """Malformed request shape (bad command payload, output without input)."""

    phase = "request"


class WorkspaceError(SacBridgeError, OSError):
    """Workspace directory could not be created or removed."""

    phase = "mkdir"


class CleanupError(WorkspaceError):
    """Generated files or the workspace itself could not be removed."""

    phase = "cleanup"


class LaunchError(SacBridgeError, RuntimeError):
    """The launch step itself failed before SAC could run detached."""

    phase = "launch"

    def __init__(self, message: str, *, diagnostic: str = "") -> None:
        super().__init__(message)
        self.diagnostic = diagnostic


class SacTimeoutError(SacBridgeError, TimeoutError):
    """Completion sentinel was not observed before the deadline."""

    phase = "timeout"

    def __init__(self, message: str, *, timeout_seconds: float) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds
