"""SAC launcher implementations."""

from sac_bridge.backend.base import LaunchRequest, LaunchResult, SacLauncher
from sac_bridge.backend.process_launcher import DetachedProcessLauncher

__all__ = [
    "DetachedProcessLauncher",
    "LaunchRequest",
    "LaunchResult",
    "SacLauncher",
]
