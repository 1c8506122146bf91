"""Pillow canvas holding one montage."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from montage_wallpaper import compositor
from montage_wallpaper.constants import COLOR_MODE_RGBA, COLOR_TRANSPARENT

if TYPE_CHECKING:  # pragma: no cover
    from montage_wallpaper.layout import ResolvedPlacement


class Canvas:
    """Fixed size RGBA canvas, initialised to transparent black."""

    def __init__(self, width: int, height: int) -> None:
        self._image = Image.new(
            COLOR_MODE_RGBA, (width, height), COLOR_TRANSPARENT,
        )

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def draw(
        self,
        img: Image.Image,
        placement: ResolvedPlacement,
        resample: Image.Resampling = Image.Resampling.BICUBIC,
    ) -> None:
        """Draw img into the placement rectangle, replacing its pixels."""
        compositor.draw(self._image, img, placement, resample)

    def region(self, placement: ResolvedPlacement) -> Image.Image:
        """Return a copy of the pixels inside a placement rectangle."""
        return self._image.crop(placement.box)
