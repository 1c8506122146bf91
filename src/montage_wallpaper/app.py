"""
Wallpaper application: a registry of montages keyed by wallpaper id.

Incoming images are routed to the montage they belong to. A periodic
caller runs check_update_wallpapers to export every montage that changed
since the previous pass, save it to its configured file and hand it to
the publisher.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from montage_wallpaper.config_defaults import DEFAULT_CODEC, DEFAULT_RESAMPLE
from montage_wallpaper.errors import EncodeError
from montage_wallpaper.image_io import get_codec
from montage_wallpaper.logging_utils import logger
from montage_wallpaper.montage import MontageController, UpdateResult
from montage_wallpaper.runtime.output import write_output_file

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from montage_wallpaper.config import MontageConfig, WallpaperAppConfig
    from montage_wallpaper.type_defs import CodecName, ResampleName

    Publisher = Callable[[str, bytes], None]


class WallpaperApp:
    """Create, look up, update and export wallpaper montages."""

    def __init__(
        self,
        *,
        codec: CodecName = DEFAULT_CODEC,
        resample: ResampleName = DEFAULT_RESAMPLE,
        publisher: Publisher | None = None,
    ) -> None:
        get_codec(codec)  # fail early on an unknown codec name
        self._codec: CodecName = codec
        self._resample: ResampleName = resample
        self._publisher = publisher
        self._montages: dict[str, MontageController] = {}

    @classmethod
    def from_config(
        cls,
        config: WallpaperAppConfig,
        *,
        publisher: Publisher | None = None,
    ) -> WallpaperApp:
        """Build the app and one montage per configured wallpaper."""
        app = cls(
            codec=config.codec,
            resample=config.resample,
            publisher=publisher,
        )
        app.create_wallpapers_from_config(config)
        return app

    @property
    def wallpaper_ids(self) -> list[str]:
        return list(self._montages)

    def create_wallpapers_from_config(
        self,
        config: WallpaperAppConfig,
    ) -> None:
        logger.info(
            "Loading %d wallpapers from config", len(config.wallpapers),
        )
        for wallpaper in config.wallpapers:
            self.create_wallpaper(wallpaper)

    def create_wallpaper(self, config: MontageConfig) -> MontageController:
        """
        Create the montage for a wallpaper, replacing one with the same id.

        Raises:
            ConfigError: If the montage geometry is invalid.

        """
        logger.info("Creating wallpaper %s", config.id)
        montage = MontageController(
            config, codec=self._codec, resample=self._resample,
        )
        self._montages[config.id] = montage
        return montage

    def get_wallpaper(self, wallpaper_id: str) -> MontageController | None:
        return self._montages.get(wallpaper_id)

    def delete_wallpaper(self, wallpaper_id: str) -> None:
        if self._montages.pop(wallpaper_id, None) is not None:
            logger.info("Deleted wallpaper %s", wallpaper_id)

    def handle_input_image(
        self,
        wallpaper_id: str,
        source: str,
        data: bytes,
    ) -> UpdateResult | None:
        """Route an image to a wallpaper; None if the wallpaper is unknown."""
        montage = self.get_wallpaper(wallpaper_id)
        if montage is None:
            logger.warning(
                "Image from %s for unknown wallpaper %s ignored",
                source,
                wallpaper_id,
            )
            return None
        logger.info("Update of wallpaper %s from %s", wallpaper_id, source)
        return montage.update_image(source, data)

    def generate_wallpaper_image(self, montage: MontageController) -> bytes:
        """
        Export a montage, then save and publish it as configured.

        Raises:
            EncodeError: If the canvas cannot be encoded.
            OSError: If the configured file cannot be written.

        """
        config = montage.config
        jpeg_data = montage.export_as_jpeg()
        if config.filename:
            write_output_file(Path(config.filename), jpeg_data)
        if config.publish and self._publisher is not None:
            self._publisher(config.id, jpeg_data)
        return jpeg_data

    def check_update_wallpapers(self) -> list[str]:
        """
        Export every montage that was drawn on since the last check.

        A failing wallpaper is logged and skipped. Returns the ids of the
        wallpapers that were exported.
        """
        exported: list[str] = []
        for wallpaper_id, montage in list(self._montages.items()):
            if montage.take_update_count() == 0:
                continue
            try:
                self.generate_wallpaper_image(montage)
            except (EncodeError, OSError) as exc:
                logger.error(
                    "Error generating wallpaper %s: %s", wallpaper_id, exc,
                )
                continue
            exported.append(wallpaper_id)
        return exported
