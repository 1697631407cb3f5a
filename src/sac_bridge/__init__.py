"""Run SAC command batches headlessly through temporary macros."""

from sac_bridge.errors import (
    CleanupError,
    InvalidArgumentError,
    LaunchError,
    SacBridgeError,
    SacTimeoutError,
    WorkspaceError,
)
from sac_bridge.runner import RunResult, SacRunner, run_sac

__version__ = "0.1.0"

__all__ = [
    "CleanupError",
    "InvalidArgumentError",
    "LaunchError",
    "RunResult",
    "SacBridgeError",
    "SacRunner",
    "SacTimeoutError",
    "WorkspaceError",
    "__version__",
    "run_sac",
]
