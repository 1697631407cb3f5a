"""Controllers for sac-bridge CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from sac_bridge.codec import RawFileCodec
from sac_bridge.config import Settings
from sac_bridge.macro import build_macro
from sac_bridge.runner import SacRunner
from sac_bridge.workspace import slot_names


@dataclass(slots=True)
class SacRunCommand:
    """CLI input for one SAC run."""

    commands: tuple[str, ...]
    input_paths: tuple[Path, ...]
    write_back: bool
    artifact_dir: Path | None
    executable: str | None = None
    scratch_root: Path | None = None
    timeout_seconds: float | None = None


@dataclass(slots=True)
class SacMacroCommand:
    """CLI input for macro preview."""

    commands: tuple[str, ...]
    inputs: int
    write_back: bool


class SacCliController:
    """Coordinates SAC runs and macro previews for the CLI."""

    def run(self, command: SacRunCommand) -> list[str]:
        settings = _settings_with_overrides(command)
        codec = RawFileCodec()
        series = codec.read(list(command.input_paths))
        result = SacRunner(settings, codec=codec).run(
            list(command.commands),
            series,
            want_output=command.write_back,
            artifact_dir=command.artifact_dir,
        )

        lines: list[str] = []
        if result.raw_output:
            lines.extend(result.raw_output.rstrip("\n").splitlines())
        if result.output_series is not None:
            for path, payload in zip(command.input_paths, result.output_series, strict=True):
                path.write_bytes(payload)
                lines.append(f"Updated: {path}")
        lines.extend(f"Artifact: {artifact}" for artifact in result.artifacts)
        lines.append(
            f"SAC run completed: commands={len(command.commands)} "
            f"inputs={len(command.input_paths)} elapsed={result.elapsed_seconds:.2f}s",
        )
        return lines

    def render_macro(self, command: SacMacroCommand) -> list[str]:
        text = build_macro(
            list(command.commands),
            slot_names(command.inputs),
            want_output=command.write_back,
        )
        return text.splitlines()


def _settings_with_overrides(command: SacRunCommand) -> Settings:
    settings = Settings.from_env()
    if command.executable is not None:
        settings = replace(settings, executable=command.executable)
    if command.scratch_root is not None:
        settings = replace(settings, scratch_root=command.scratch_root)
    if command.timeout_seconds is not None:
        settings = replace(settings, timeout_seconds=command.timeout_seconds)
    return settings
