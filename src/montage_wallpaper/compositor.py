"""Resize source images to their placement and draw them on the canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from PIL import Image, ImageOps

if TYPE_CHECKING:  # pragma: no cover
    from montage_wallpaper.layout import ResolvedPlacement
    from montage_wallpaper.type_defs import ResampleName, ResizePolicy


def resample_filter(name: ResampleName) -> Image.Resampling:
    """Map a configured filter name to the Pillow resampling enum."""
    return Image.Resampling[name.upper()]


def _resize_to_width(
    img: Image.Image,
    width: int,
    resample: Image.Resampling,
) -> Image.Image:
    """Resize keeping aspect so that resulting width matches."""
    w, h = img.size
    new_h = max(1, round(h * width / w))
    return img.resize((width, new_h), resample)


def _resize_to_height(
    img: Image.Image,
    height: int,
    resample: Image.Resampling,
) -> Image.Image:
    """Resize keeping aspect so that resulting height matches."""
    w, h = img.size
    new_w = max(1, round(w * height / h))
    return img.resize((new_w, height), resample)


def resize_image(
    img: Image.Image,
    size: tuple[int, int],
    policy: ResizePolicy,
    resample: Image.Resampling = Image.Resampling.BICUBIC,
) -> Image.Image:
    """
    Apply a resize policy for a target box of the given size.

    width and height keep the aspect ratio and may overflow the other
    side. crop fills the box exactly and trims the overflow around the
    center. scale stretches to the box. none leaves the image alone.
    """
    width, height = size
    match policy:
        case "width":
            return _resize_to_width(img, width, resample)
        case "height":
            return _resize_to_height(img, height, resample)
        case "crop":
            return ImageOps.fit(
                img, size, method=resample, centering=(0.5, 0.5),
            )
        case "scale":
            return img.resize(size, resample)
        case "none":
            return img
        case _:
            assert_never(policy)


def draw(
    canvas: Image.Image,
    img: Image.Image,
    placement: ResolvedPlacement,
    resample: Image.Resampling = Image.Resampling.BICUBIC,
) -> None:
    """
    Draw img into the placement rectangle of canvas.

    Pixels inside the rectangle are replaced, not blended. Whatever the
    resized image has beyond the rectangle is dropped, and the paste is
    clipped to the canvas.
    """
    resized = resize_image(img, placement.size, placement.resize, resample)
    if resized.width > placement.width or resized.height > placement.height:
        resized = resized.crop((
            0,
            0,
            min(resized.width, placement.width),
            min(resized.height, placement.height),
        ))
    canvas.paste(resized, (placement.x, placement.y))
