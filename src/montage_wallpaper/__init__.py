"""Public package exports for the montage wallpaper engine."""

from __future__ import annotations

from .app import WallpaperApp
from .config import (
    ConfigLoader,
    ImagePlacement,
    MontageConfig,
    WallpaperAppConfig,
)
from .errors import ConfigError, DecodeError, EncodeError, MontageError
from .image_io import ImageCodec, OpenCVCodec, PillowCodec, get_codec
from .layout import ResolvedPlacement, resolve_layout
from .montage import MontageController, UpdateResult

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "DecodeError",
    "EncodeError",
    "ImageCodec",
    "ImagePlacement",
    "MontageConfig",
    "MontageController",
    "MontageError",
    "OpenCVCodec",
    "PillowCodec",
    "ResolvedPlacement",
    "UpdateResult",
    "WallpaperApp",
    "WallpaperAppConfig",
    "get_codec",
    "resolve_layout",
]
