"""Data-series codec interface used to move series in and out of file slots."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol


class SeriesCodec(Protocol):
    """Protocol implemented by SAC file readers/writers.

    Paths are handed over in slot order; ``read`` must return series in the
    same order.
    """

    def write(self, paths: Sequence[Path], series: Sequence[Any]) -> None:
        """Serialize each series to the matching path."""

    def read(self, paths: Sequence[Path]) -> list[Any]:
        """Deserialize one series per path."""


class RawFileCodec:
    """Pass-through codec whose series are the raw bytes of SAC files.

    Useful when the caller already holds SAC files on disk and only wants
    SAC to process them; the file content is never parsed.
    """

    def write(self, paths: Sequence[Path], series: Sequence[bytes]) -> None:
        if len(paths) != len(series):
            raise ValueError(f"Got {len(series)} series for {len(paths)} slots.")
        for path, payload in zip(paths, series, strict=True):
            path.write_bytes(payload)

    def read(self, paths: Sequence[Path]) -> list[bytes]:
        return [path.read_bytes() for path in paths]
