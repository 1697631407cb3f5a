"""CLI entrypoint for sac-bridge."""

import logging
from pathlib import Path

import rich_click as click

from sac_bridge import __version__
from sac_bridge.controllers import SacCliController, SacMacroCommand, SacRunCommand
from sac_bridge.errors import SacBridgeError

click.rich_click.USE_MARKDOWN = True
SAC_CONTROLLER = SacCliController()


@click.group()
@click.version_option(version=__version__, prog_name="sac-bridge")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def sac_bridge(verbose: bool) -> None:
    """Run SAC command batches headlessly."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@sac_bridge.command("run")
@click.option(
    "--command",
    "-c",
    "commands",
    multiple=True,
    required=True,
    help="SAC command line. Can be repeated; lines run in order.",
)
@click.option(
    "--input",
    "-i",
    "input_paths",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="SAC file read before the commands run. Can be repeated.",
)
@click.option(
    "--write-back",
    is_flag=True,
    default=False,
    help="Overwrite the input files with the processed traces.",
)
@click.option(
    "--artifact-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where leftover files such as SGF plots are copied. Defaults to the current directory.",
)
@click.option("--executable", default=None, help="SAC executable path.")
@click.option(
    "--scratch-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root directory for temporary workspaces.",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for SAC to finish.",
)
def run(  # noqa: PLR0913
    commands: tuple[str, ...],
    input_paths: tuple[Path, ...],
    write_back: bool,
    artifact_dir: Path | None,
    executable: str | None,
    scratch_root: Path | None,
    timeout_seconds: float | None,
) -> None:
    """Run SAC commands through a temporary macro."""

    try:
        lines = SAC_CONTROLLER.run(
            SacRunCommand(
                commands=commands,
                input_paths=input_paths,
                write_back=write_back,
                artifact_dir=artifact_dir,
                executable=executable,
                scratch_root=scratch_root,
                timeout_seconds=timeout_seconds,
            ),
        )
    except (SacBridgeError, ValueError) as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(lines)


@sac_bridge.command("macro")
@click.option(
    "--command",
    "-c",
    "commands",
    multiple=True,
    required=True,
    help="SAC command line. Can be repeated.",
)
@click.option(
    "--inputs",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of input series the macro reads.",
)
@click.option("--write-back", is_flag=True, default=False, help="Add the write directive.")
def macro(commands: tuple[str, ...], inputs: int, write_back: bool) -> None:
    """Print the macro `run` would generate, without running SAC."""

    try:
        lines = SAC_CONTROLLER.render_macro(
            SacMacroCommand(commands=commands, inputs=inputs, write_back=write_back),
        )
    except SacBridgeError as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    sac_bridge()
