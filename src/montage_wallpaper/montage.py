"""
Montage controller.

Holds one montage configuration together with its resolved layout, its
canvas and the count of draws since the last export. Updates and
exports may arrive from different threads; the canvas and the counter
are only touched while holding the controller lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from montage_wallpaper.canvas import Canvas
from montage_wallpaper.compositor import resample_filter
from montage_wallpaper.config_defaults import DEFAULT_CODEC, DEFAULT_RESAMPLE
from montage_wallpaper.errors import DecodeError, EncodeError
from montage_wallpaper.image_io import get_codec
from montage_wallpaper.layout import ResolvedPlacement, resolve_layout
from montage_wallpaper.logging_utils import logger
from montage_wallpaper.runtime.output import write_output_file

if TYPE_CHECKING:  # pragma: no cover
    from montage_wallpaper.config import MontageConfig
    from montage_wallpaper.image_io import ImageCodec
    from montage_wallpaper.type_defs import CodecName, ResampleName


@dataclass(slots=True)
class UpdateResult:
    """Outcome of feeding one source image to a montage."""

    source: str
    drawn: int = 0
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        """True when the image decoded, even if no placement matched."""
        return self.error is None


class MontageController:
    """Compose source images into one montage and export it as JPEG."""

    def __init__(
        self,
        config: MontageConfig,
        *,
        codec: ImageCodec | CodecName = DEFAULT_CODEC,
        resample: ResampleName = DEFAULT_RESAMPLE,
    ) -> None:
        """
        Resolve the layout and allocate the canvas.

        Raises:
            ConfigError: If the geometry leaves no room for a cell.

        """
        self._config = config
        self._codec = get_codec(codec) if isinstance(codec, str) else codec
        self._resample = resample_filter(resample)
        self._placements = resolve_layout(config)
        self._canvas = Canvas(config.width, config.height)
        self._update_count = 0
        self._lock = threading.Lock()

        if config.missing_image:
            logger.warning(
                "Montage %s: missing_image substitution is not applied; "
                "placements keep their last image.",
                config.label,
            )
        logger.debug(
            "Montage %s: %dx%d canvas, %d placements, %s codec",
            config.label,
            config.width,
            config.height,
            len(self._placements),
            self._codec.name,
        )

    @property
    def config(self) -> MontageConfig:
        return self._config

    @property
    def codec(self) -> ImageCodec:
        return self._codec

    @property
    def placements(self) -> tuple[ResolvedPlacement, ...]:
        return tuple(self._placements)

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def update_count(self) -> int:
        """Number of successful draws not yet consumed."""
        with self._lock:
            return self._update_count

    def take_update_count(self) -> int:
        """Return the update count and reset it to zero."""
        with self._lock:
            count = self._update_count
            self._update_count = 0
        return count

    def update_image(self, source: str, data: bytes) -> UpdateResult:
        """
        Draw a new image for every placement fed by source.

        A decode failure is logged and reported on the result. The canvas
        and the update count are left as they were.
        """
        matches = [p for p in self._placements if p.source == source]
        result = UpdateResult(source=source)
        if not matches:
            logger.debug(
                "Montage %s: no placement for source %s",
                self._config.label,
                source,
            )
            return result

        try:
            img = self._codec.decode(data)
        except DecodeError as e:
            logger.error(
                "Montage %s: failed decoding image of %s: %s",
                self._config.label,
                source,
                e,
            )
            result.error = e
            return result
        logger.debug(
            "Montage %s: image of %s decoded (%s, %dx%d)",
            self._config.label,
            source,
            img.info.get("format"),
            img.width,
            img.height,
        )

        with self._lock:
            for placement in matches:
                self._canvas.draw(img, placement, self._resample)
                self._update_count += 1
                result.drawn += 1
        return result

    def export_as_jpeg(self) -> bytes:
        """
        Encode the current canvas as JPEG.

        The update count is left alone; consuming it is up to the caller.
        """
        logger.debug("Montage %s: exporting", self._config.label)
        with self._lock:
            try:
                return self._codec.encode(
                    self._canvas.image, self._config.jpeg_quality,
                )
            except EncodeError as e:
                logger.error(
                    "Montage %s: error encoding canvas: %s",
                    self._config.label,
                    e,
                )
                raise

    def write_to_file(self, path: str | Path) -> None:
        """Export the montage and write it to path. Empty path is a no-op."""
        if str(path) in ("", "."):
            return
        write_output_file(Path(path), self.export_as_jpeg())
