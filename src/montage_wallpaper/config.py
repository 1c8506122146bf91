"""
Configuration schema and loader for the montage wallpaper engine.

Defines Pydantic models for montages and their image placements, and a
TOML-based config loader with validation support.
"""

from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, model_validator

from montage_wallpaper.config_defaults import (
    DEFAULT_BORDER,
    DEFAULT_CODEC,
    DEFAULT_FILENAME,
    DEFAULT_HEIGHT,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_PUBLISH,
    DEFAULT_RESAMPLE,
    DEFAULT_RESIZE,
    DEFAULT_ROWS,
    DEFAULT_WIDTH,
)
from montage_wallpaper.constants import (
    JPEG_QUALITY_MAX,
    JPEG_QUALITY_MIN,
    MAX_BORDER,
    MAX_HEIGHT,
    MAX_ROWS,
    MAX_WIDTH,
    MIN_SIDE,
)
from montage_wallpaper.type_defs import CodecName, ResampleName, ResizePolicy


class ImagePlacement(BaseModel):
    """
    Declared placement of one source image on the montage.

    Zero for x, y, width or height means automatic layout.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(min_length=1)
    x: int = 0
    y: int = 0
    width: int = Field(0, ge=0)
    height: int = Field(0, ge=0)
    resize: ResizePolicy | None = None
    interval: int = Field(DEFAULT_POLL_INTERVAL, ge=1)


class MontageConfig(BaseModel):
    """
    Settings of a single montage.

    Geometry that leaves no room for a cell is rejected when the layout
    is resolved, not here.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    border: int = Field(DEFAULT_BORDER, ge=0, le=MAX_BORDER)
    width: int = Field(DEFAULT_WIDTH, ge=MIN_SIDE, le=MAX_WIDTH)
    height: int = Field(DEFAULT_HEIGHT, ge=MIN_SIDE, le=MAX_HEIGHT)
    rows: int = Field(DEFAULT_ROWS, ge=1, le=MAX_ROWS)
    resize: ResizePolicy = DEFAULT_RESIZE
    publish: bool = DEFAULT_PUBLISH
    filename: str = DEFAULT_FILENAME
    jpeg_quality: int = Field(
        DEFAULT_JPEG_QUALITY,
        ge=JPEG_QUALITY_MIN,
        le=JPEG_QUALITY_MAX,
    )
    # Accepted for compatibility; missing images keep their last content.
    missing_image: str | None = None
    images: list[ImagePlacement] = Field(default_factory=list)

    @property
    def label(self) -> str:
        """Name used in log messages."""
        return self.name or self.id


class WallpaperAppConfig(BaseModel):
    """
    Root configuration object for the wallpaper application.

    Mirrors the structure of wallpaper.toml: codec selection at the top
    level and one [[wallpapers]] table per montage.
    """

    codec: CodecName = DEFAULT_CODEC
    resample: ResampleName = DEFAULT_RESAMPLE
    wallpapers: list[MontageConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "WallpaperAppConfig":
        seen: set[str] = set()
        for wallpaper in self.wallpapers:
            if wallpaper.id in seen:
                msg = f"Duplicate wallpaper id: {wallpaper.id}"
                raise ValueError(msg)
            seen.add(wallpaper.id)
        return self


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing fields.
    """

    @staticmethod
    def load(path: str) -> WallpaperAppConfig:
        """
        Load the wallpaper application configuration from a TOML file.

        Returns a validated WallpaperAppConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return WallpaperAppConfig.model_validate(doc.unwrap())
