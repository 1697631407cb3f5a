"""Harvest SAC results from a completed workspace."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sac_bridge.codec import SeriesCodec
from sac_bridge.errors import CleanupError
from sac_bridge.workspace import Workspace

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CollectedResults:
    """Everything taken out of a workspace before it is removed."""

    raw_output: str
    output_series: list[Any] | None
    artifacts: list[Path] = field(default_factory=list)


class ResultCollector:
    """Reads output series, drops generated files, copies the rest out."""

    def __init__(self, codec: SeriesCodec) -> None:
        self.codec = codec

    def collect(
        self,
        workspace: Workspace,
        slots: Sequence[str],
        *,
        want_output: bool,
    ) -> CollectedResults:
        slot_paths = workspace.slot_paths(list(slots))
        output_series = self.codec.read(slot_paths) if want_output else None
        raw_output = read_output_log(workspace.output_log_path)

        remove_files(
            [workspace.macro_path, workspace.sentinel_path, workspace.output_log_path],
        )
        remove_files(slot_paths)
        artifacts = copy_artifacts(workspace.path, workspace.origin_dir)
        return CollectedResults(
            raw_output=raw_output,
            output_series=output_series,
            artifacts=artifacts,
        )


def read_output_log(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_bytes().decode("utf-8", errors="replace")


def remove_files(paths: Sequence[Path]) -> None:
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError as error:
            raise CleanupError(f"SAC run: cleanup failed removing {path}: {error}") from error


def copy_artifacts(source_dir: Path, target_dir: Path) -> list[Path]:
    """Copy every regular file left in ``source_dir``; failures are only logged."""

    copied: list[Path] = []
    for path in sorted(source_dir.iterdir()):
        if not path.is_file():
            continue
        target = target_dir / path.name
        try:
            shutil.copy2(path, target)
        except OSError as error:
            logger.warning("Skipping artifact %s -> %s: %s", path, target_dir, error)
            continue
        copied.append(target)
    if copied:
        logger.info("Copied %d artifact(s) to %s", len(copied), target_dir)
    return copied
