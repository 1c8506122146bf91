"""
Image decoding and JPEG encoding strategies.

Two interchangeable codecs share the ImageCodec protocol. Pillow is the
general decoder for any raster format it reads. OpenCV is the faster
JPEG-only path for deployments whose sources only deliver JPEG.
"""
from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol

import cv2
import numpy as np
from PIL import Image

from montage_wallpaper.constants import (
    COLOR_BLACK,
    COLOR_MODE_RGB,
    JPEG_SOI_MARKER,
)
from montage_wallpaper.errors import DecodeError, EncodeError

if TYPE_CHECKING:  # pragma: no cover
    from montage_wallpaper.type_defs import CodecName


class ImageCodec(Protocol):
    """Decode raw image bytes and encode images to JPEG."""

    name: CodecName

    def decode(self, data: bytes) -> Image.Image:
        """Return the decoded image or raise DecodeError."""
        ...

    def encode(self, image: Image.Image, quality: int) -> bytes:
        """Return JPEG bytes or raise EncodeError."""
        ...


def to_rgb(
    img: Image.Image,
    *,
    bg_color: tuple[int, int, int],
) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA"):
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    if img.mode.startswith("I"):
        # 16-bit samples, scaled down instead of clipped at 255
        levels = np.asarray(img, dtype=np.float64) / 256
        img = Image.fromarray(np.clip(levels, 0, 255).astype(np.uint8))
    return img.convert(COLOR_MODE_RGB)


class PillowCodec:
    """General purpose codec backed by Pillow."""

    name: CodecName = "pillow"

    def decode(self, data: bytes) -> Image.Image:
        """
        Decode any format Pillow understands.

        The image is fully loaded here so truncated data fails now rather
        than later while drawing.
        """
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
            fmt = img.format
            decoded = to_rgb(img, bg_color=COLOR_BLACK)
        except (OSError, ValueError, SyntaxError,
                Image.DecompressionBombError) as e:
            msg = f"Error decoding image: {e!s}"
            raise DecodeError(msg) from e
        decoded.info["format"] = fmt
        return decoded

    def encode(self, image: Image.Image, quality: int) -> bytes:
        """Encode as baseline JPEG at the given quality."""
        buffer = io.BytesIO()
        try:
            to_rgb(image, bg_color=COLOR_BLACK).save(
                buffer, format="JPEG", quality=quality,
            )
        except (OSError, ValueError) as e:
            msg = f"Error encoding JPEG: {e!s}"
            raise EncodeError(msg) from e
        return buffer.getvalue()


class OpenCVCodec:
    """JPEG-only codec backed by OpenCV's libjpeg-turbo build."""

    name: CodecName = "opencv"

    def decode(self, data: bytes) -> Image.Image:
        """Decode JPEG bytes, rejecting anything without a JPEG header."""
        if not data.startswith(JPEG_SOI_MARKER):
            msg = "Error decoding image: not a JPEG stream"
            raise DecodeError(msg)
        buf = np.frombuffer(data, dtype=np.uint8)
        try:
            bgr = cv2.imdecode(
                buf, cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION,
            )
        except cv2.error as e:
            msg = f"Error decoding image: {e!s}"
            raise DecodeError(msg) from e
        if bgr is None:
            msg = "Error decoding image: corrupt JPEG stream"
            raise DecodeError(msg)
        rgb = cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
        decoded = Image.fromarray(rgb)
        decoded.info["format"] = "JPEG"
        return decoded

    def encode(self, image: Image.Image, quality: int) -> bytes:
        """Encode as JPEG at the given quality."""
        rgb = np.asarray(to_rgb(image, bg_color=COLOR_BLACK))
        try:
            bgr = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
            ok, encoded = cv2.imencode(
                ".jpg", bgr, [cv2.IMWRITE_JPEG_QUALITY, int(quality)],
            )
        except cv2.error as e:
            msg = f"Error encoding JPEG: {e!s}"
            raise EncodeError(msg) from e
        if not ok:
            msg = "Error encoding JPEG: encoder returned no data"
            raise EncodeError(msg)
        return encoded.tobytes()


_CODECS: dict[str, type[PillowCodec] | type[OpenCVCodec]] = {
    PillowCodec.name: PillowCodec,
    OpenCVCodec.name: OpenCVCodec,
}


def get_codec(name: CodecName) -> ImageCodec:
    """Return a codec instance for the configured name."""
    try:
        return _CODECS[name]()
    except KeyError as e:
        msg = f"Unknown codec: {name!r}. Expected one of {sorted(_CODECS)}"
        raise ValueError(msg) from e
