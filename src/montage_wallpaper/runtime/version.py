"""Resolve the version string shown by ``montage-wallpaper --version``."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from montage_wallpaper.logging_utils import logger

DISTRIBUTION_NAME = "montage-wallpaper"
FALLBACK_VERSION = "0.0.0"


def _installed_version() -> str | None:
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return None


def _source_tree_version(start: Path) -> str | None:
    """Read project.version from the closest pyproject.toml above start."""
    pyproject = next(
        (p / "pyproject.toml" for p in start.parents
         if (p / "pyproject.toml").is_file()),
        None,
    )
    if pyproject is None:
        return None
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Error reading %s: %s", pyproject, exc)
        return None
    version = data.get("project", {}).get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the checkout's, else a placeholder.

    A source checkout that was never installed still reports the version
    declared in its pyproject.toml.
    """
    return (
        _installed_version()
        or _source_tree_version(Path(__file__).resolve())
        or FALLBACK_VERSION
    )
