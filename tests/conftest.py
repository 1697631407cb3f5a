"""Shared test fixtures."""

from __future__ import annotations

import os
import stat
import sys
import time
from pathlib import Path

import pytest

from sac_bridge.backend import LaunchRequest, LaunchResult
from sac_bridge.config import Settings

_FAKE_SAC_SCRIPT = """
import subprocess
import sys
import time
from pathlib import Path

loaded = []
for raw in Path(sys.argv[1]).read_text("utf-8").splitlines():
    line = raw.strip()
    if not line:
        continue
    head, _, rest = line.partition(" ")
    if head == "r":
        loaded = rest.split()
        for name in loaded:
            if not Path(name).is_file():
                print(f"ERROR 1301: No data files read in: {name}", flush=True)
                sys.exit(1)
        print(f" SAC> r {rest}", flush=True)
    elif head == "w":
        print(f" SAC> w {rest}", flush=True)
    elif head == "sc":
        subprocess.run(rest, shell=True, check=True)
    elif head == "reverse":
        for name in loaded:
            path = Path(name)
            path.write_bytes(path.read_bytes()[::-1])
    elif head == "p1":
        Path("f001.sgf").write_text("plot", "utf-8")
    elif head == "hang":
        time.sleep(float(rest or "30"))
    elif head == "bad":
        print("ERROR 1106: Not a valid SAC command.", flush=True)
        sys.exit(1)
    elif head == "quit":
        break
    else:
        print(f" SAC> {line}", flush=True)
"""


@pytest.fixture()
def fake_sac(tmp_path: Path) -> Path:
    """Write an executable that interprets a tiny subset of the SAC macro language."""

    if os.name == "nt":
        pytest.skip("fake SAC wrapper is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    implementation = bin_dir / "fake_sac.py"
    implementation.write_text(_FAKE_SAC_SCRIPT.strip() + "\n", "utf-8")
    launcher = bin_dir / "sac"
    launcher.write_text(
        f'#!/usr/bin/env sh\nexec "{sys.executable}" "{implementation}" "$@"\n',
        "utf-8",
    )
    launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)
    return launcher


@pytest.fixture()
def scratch_root(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture()
def settings(fake_sac: Path, scratch_root: Path) -> Settings:
    return Settings(
        executable=str(fake_sac),
        scratch_root=scratch_root,
        timeout_seconds=10.0,
        poll_interval_seconds=0.01,
    )


class InstantLauncher:
    """Pretends SAC ran the macro instantly and touched the sentinel."""

    def __init__(self) -> None:
        self.requests: list[LaunchRequest] = []

    def launch(self, request: LaunchRequest) -> LaunchResult:
        self.requests.append(request)
        request.output_log_path.write_text(" SAC> quit\n", "utf-8")
        (request.workdir / "sac_complete").touch()
        return LaunchResult(
            pid=None,
            started_monotonic=time.monotonic(),
            output_log_path=request.output_log_path,
        )


class SilentLauncher:
    """Pretends SAC started but never finished the macro."""

    def launch(self, request: LaunchRequest) -> LaunchResult:
        return LaunchResult(
            pid=None,
            started_monotonic=time.monotonic(),
            output_log_path=request.output_log_path,
        )


@pytest.fixture()
def instant_launcher() -> InstantLauncher:
    return InstantLauncher()


@pytest.fixture()
def silent_launcher() -> SilentLauncher:
    return SilentLauncher()
