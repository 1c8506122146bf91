"""Helpers for persisting exported montages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from montage_wallpaper.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path


def write_output_file(path: Path, data: bytes) -> None:
    """
    Write data to path, creating missing parent directories.

    Raises:
        OSError: If the directory cannot be created or the file written.

    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
