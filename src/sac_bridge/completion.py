"""Completion detection by polling for the SAC sentinel file."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from sac_bridge.errors import SacTimeoutError

logger = logging.getLogger(__name__)


def wait_for_sentinel(  # noqa: PLR0913
    sentinel_path: Path,
    *,
    started_monotonic: float,
    timeout_seconds: float,
    poll_interval_seconds: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> float:
    """Block until ``sentinel_path`` exists; return seconds since launch.

    The deadline is ``started_monotonic + timeout_seconds``. Sleeps between
    checks never overshoot the deadline, and one last check is made at it.
    """

    deadline = started_monotonic + timeout_seconds
    while True:
        if sentinel_path.exists():
            elapsed = clock() - started_monotonic
            logger.info("SAC completed: sentinel=%s elapsed=%.3fs", sentinel_path, elapsed)
            return elapsed
        remaining = deadline - clock()
        if remaining <= 0:
            break
        sleep(min(poll_interval_seconds, remaining))

    logger.warning(
        "SAC did not complete within %.3fs; sentinel %s missing",
        timeout_seconds,
        sentinel_path,
    )
    raise SacTimeoutError(
        f"SAC run: timeout: SAC did not complete within {timeout_seconds:g}s. "
        "An error in a SAC command leaves it waiting for input; check the commands.",
        timeout_seconds=timeout_seconds,
    )
