"""Render SAC macros from opaque command lines and file slots.

A macro is plain text, one directive per line, in this order:

    r <slot> ...          only when input series are supplied
    <caller commands>     verbatim, never interpreted
    w <slot> ...          only when output series are requested
    sc touch <sentinel>   completion signal, must run last before quitting
    quit
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from sac_bridge.errors import InvalidArgumentError
from sac_bridge.workspace import SENTINEL_FILENAME

logger = logging.getLogger(__name__)


def command_lines(commands: object) -> list[str]:
    """Shape-check a command payload: a string, or a list/tuple of strings."""

    if isinstance(commands, str):
        return [commands]
    if isinstance(commands, list | tuple):
        lines = list(commands)
        for position, line in enumerate(lines):
            if not isinstance(line, str):
                raise InvalidArgumentError(
                    "SAC run: bad format for command: "
                    f"item {position} is {type(line).__name__}, expected str.",
                )
        return lines
    raise InvalidArgumentError(
        f"SAC run: bad format for command: {type(commands).__name__}, "
        "expected str or a list of str.",
    )


def build_macro(
    commands: object,
    slots: Sequence[str] = (),
    *,
    want_output: bool = False,
    sentinel_name: str = SENTINEL_FILENAME,
) -> str:
    """Return macro text for ``commands`` reading and optionally rewriting ``slots``."""

    if want_output and not slots:
        raise InvalidArgumentError(
            "SAC run: output series requested with no input series.",
        )

    lines: list[str] = []
    if slots:
        lines.append("r " + " ".join(slots))
    lines.extend(command_lines(commands))
    if want_output:
        lines.append("w " + " ".join(slots))
    lines.append(f"sc touch {sentinel_name}")
    lines.append("quit")
    return "".join(f"{line}\n" for line in lines)


def write_macro(path: Path, text: str) -> Path:
    path.write_text(text, "utf-8")
    logger.debug("Macro written to %s:\n%s", path, text)
    return path
