"""Run batches of SAC commands through a temporary macro.

Each run owns a fresh workspace: optional input series are written to file
slots, a macro reads them, applies the commands, optionally writes them back
and touches a sentinel file before quitting. SAC runs detached, so the
sentinel is the only success signal. Any error inside SAC's own command
interpretation leaves it waiting for input and surfaces here as a timeout.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sac_bridge.backend import DetachedProcessLauncher, LaunchRequest, SacLauncher
from sac_bridge.codec import RawFileCodec, SeriesCodec
from sac_bridge.collector import ResultCollector
from sac_bridge.completion import wait_for_sentinel
from sac_bridge.config import Settings
from sac_bridge.errors import CleanupError, InvalidArgumentError
from sac_bridge.macro import build_macro, command_lines, write_macro
from sac_bridge.workspace import Workspace, WorkspaceManager, slot_names

logger = logging.getLogger(__name__)

REAP_TIMEOUT_SECONDS = 2.0


@dataclass(slots=True)
class RunResult:
    """Outcome of one successful SAC run."""

    raw_output: str
    output_series: list[Any] | None
    workspace: Path
    elapsed_seconds: float
    artifacts: list[Path] = field(default_factory=list)


class SacRunner:
    """Submit commands (and optional series) to SAC and collect the results."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        launcher: SacLauncher | None = None,
        codec: SeriesCodec | None = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self.settings.validate()
        self.launcher = launcher or DetachedProcessLauncher()
        self.codec = codec or RawFileCodec()
        self.workspaces = WorkspaceManager(self.settings.scratch_root)

    def run(
        self,
        commands: str | Sequence[str],
        input_series: Sequence[Any] | None = None,
        *,
        want_output: bool = False,
        artifact_dir: Path | None = None,
    ) -> RunResult:
        """Run ``commands`` once; the workspace is removed whatever the outcome.

        ``want_output`` reads the input series back after the commands ran and
        requires at least one input series. Leftover files (plots) are copied
        to ``artifact_dir``, which defaults to the current directory.
        """
        series = list(input_series or ())
        if want_output and not series:
            raise InvalidArgumentError(
                "SAC run: output series requested with no input series.",
            )
        lines = command_lines(commands)

        workspace = self.workspaces.acquire(origin_dir=artifact_dir)
        try:
            result = self._run_in_workspace(
                workspace,
                lines,
                series,
                want_output=want_output,
            )
        except BaseException as error:
            self._release_after_failure(workspace, error)
            raise
        self.workspaces.release(workspace)
        return result

    def _run_in_workspace(
        self,
        workspace: Workspace,
        lines: list[str],
        series: list[Any],
        *,
        want_output: bool,
    ) -> RunResult:
        slots = slot_names(len(series))
        if series:
            self.codec.write(workspace.slot_paths(slots), series)

        macro_text = build_macro(lines, slots, want_output=want_output)
        write_macro(workspace.macro_path, macro_text)

        launched = self.launcher.launch(
            LaunchRequest(
                executable=self.settings.executable,
                macro_path=workspace.macro_path,
                workdir=workspace.path,
                output_log_path=workspace.output_log_path,
            ),
        )
        elapsed = wait_for_sentinel(
            workspace.sentinel_path,
            started_monotonic=launched.started_monotonic,
            timeout_seconds=self.settings.timeout_seconds,
            poll_interval_seconds=self.settings.poll_interval_seconds,
        )
        launched.reap(REAP_TIMEOUT_SECONDS)

        collected = ResultCollector(self.codec).collect(
            workspace,
            slots,
            want_output=want_output,
        )
        return RunResult(
            raw_output=collected.raw_output,
            output_series=collected.output_series,
            workspace=workspace.path,
            elapsed_seconds=elapsed,
            artifacts=collected.artifacts,
        )

    def _release_after_failure(self, workspace: Workspace, error: BaseException) -> None:
        try:
            self.workspaces.release(workspace)
        except CleanupError as cleanup_error:
            logger.warning(
                "Workspace cleanup failed after %s: %s",
                type(error).__name__,
                cleanup_error,
            )
            raise cleanup_error from error


def run_sac(
    commands: str | Sequence[str],
    input_series: Sequence[Any] | None = None,
    *,
    want_output: bool = False,
    artifact_dir: Path | None = None,
    settings: Settings | None = None,
    codec: SeriesCodec | None = None,
) -> RunResult:
    """Run ``commands`` once with settings from the environment unless given."""

    return SacRunner(settings, codec=codec).run(
        commands,
        input_series,
        want_output=want_output,
        artifact_dir=artifact_dir,
    )
