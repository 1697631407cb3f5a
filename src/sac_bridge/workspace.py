"""Per-run scratch workspace for SAC macros and data files."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from sac_bridge.errors import CleanupError, WorkspaceError

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "sac_bridge."
MACRO_FILENAME = "run-macro"
SENTINEL_FILENAME = "sac_complete"
OUTPUT_LOG_FILENAME = "sac_output.log"


def slot_name(index: int) -> str:
    """Return the file slot name for a 1-based series index, e.g. ``s0001``."""
    if index < 1:
        raise ValueError(f"Slot index must be >= 1, got {index}")
    return f"s{index:04d}"


def slot_names(count: int) -> list[str]:
    return [slot_name(index) for index in range(1, count + 1)]


@dataclass(slots=True, frozen=True)
class Workspace:
    """Resolved absolute paths owned by one run."""

    path: Path
    origin_dir: Path

    @property
    def macro_path(self) -> Path:
        return self.path / MACRO_FILENAME

    @property
    def sentinel_path(self) -> Path:
        return self.path / SENTINEL_FILENAME

    @property
    def output_log_path(self) -> Path:
        return self.path / OUTPUT_LOG_FILENAME

    def slot_paths(self, names: list[str]) -> list[Path]:
        return [self.path / name for name in names]


class WorkspaceManager:
    """Creates uniquely named workspaces under a scratch root and removes them."""

    def __init__(self, root_dir: Path) -> None:
        self.root_dir = root_dir

    def acquire(self, origin_dir: Path | None = None) -> Workspace:
        """Create a fresh workspace; ``origin_dir`` is where artifacts end up."""

        # Paths are resolved first: nothing after mkdir may fail.
        try:
            origin = (origin_dir if origin_dir is not None else Path.cwd()).absolute()
            path = (self.root_dir / f"{WORKSPACE_PREFIX}{uuid4().hex}").absolute()
        except OSError as error:
            raise WorkspaceError(
                f"SAC run: mkdir failed: cannot resolve paths: {error}",
            ) from error
        try:
            path.mkdir(parents=True, exist_ok=False)
        except OSError as error:
            raise WorkspaceError(f"SAC run: mkdir failed: {error}") from error

        logger.info("Workspace acquired: %s (artifacts -> %s)", path, origin)
        return Workspace(path=path, origin_dir=origin)

    def release(self, workspace: Workspace) -> None:
        """Remove the workspace tree. Safe to call when it is already gone."""

        if not workspace.path.exists():
            return
        try:
            shutil.rmtree(workspace.path)
        except OSError as error:
            raise CleanupError(
                f"SAC run: cleanup failed removing {workspace.path}: {error}",
            ) from error
        logger.info("Workspace released: %s", workspace.path)
