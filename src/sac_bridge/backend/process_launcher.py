"""Subprocess-based launcher that starts SAC detached from the caller."""

from __future__ import annotations

import logging
import os
import subprocess
import time

from sac_bridge.backend.base import LaunchRequest, LaunchResult
from sac_bridge.errors import LaunchError

logger = logging.getLogger(__name__)


class DetachedProcessLauncher:
    """Start SAC in its own session with the macro as its only argument.

    The process is not waited on: completion is signalled out of band by the
    sentinel file, and a process that never writes it is left running.
    """

    def launch(self, request: LaunchRequest) -> LaunchResult:
        run_args = [request.executable, str(request.macro_path)]
        started = time.monotonic()
        try:
            with request.output_log_path.open("wb") as output_handle:
                process = subprocess.Popen(  # noqa: S603
                    run_args,
                    cwd=request.workdir,
                    stdin=subprocess.DEVNULL,
                    stdout=output_handle,
                    stderr=subprocess.STDOUT,
                    start_new_session=os.name != "nt",
                )
        except FileNotFoundError as error:
            raise LaunchError(
                f"SAC run: launch failed: executable not found: {request.executable}",
                diagnostic=str(error),
            ) from error
        except OSError as error:
            raise LaunchError(
                f"SAC run: launch failed: {error}",
                diagnostic=str(error),
            ) from error

        logger.info("SAC launched: pid=%s macro=%s", process.pid, request.macro_path)
        return LaunchResult(
            pid=process.pid,
            started_monotonic=started,
            output_log_path=request.output_log_path,
            process=process,
        )
