"""
Test configuration and shared fixtures for montage_wallpaper.

This module defines reusable pytest fixtures for generating encoded
source images and montage configurations.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import io
from collections.abc import Callable
from typing import Any

import numpy as np
import pytest
from PIL import Image

from montage_wallpaper.config import MontageConfig
from montage_wallpaper.constants import COLOR_MODE_RGB
from montage_wallpaper.logging_utils import logger


def gradient_image(
    size: tuple[int, int],
    mode: str = COLOR_MODE_RGB,
) -> Image.Image:
    """Build a non-uniform test image with horizontal and vertical ramps."""
    width, height = size
    xs = np.linspace(0, 255, width, dtype=np.float64)
    ys = np.linspace(0, 255, height, dtype=np.float64)
    red = np.tile(xs, (height, 1))
    green = np.tile(ys[:, None], (1, width))
    blue = np.full((height, width), 128.0)
    pixels = np.stack([red, green, blue], axis=-1).astype(np.uint8)
    img = Image.fromarray(pixels)
    return img if mode == COLOR_MODE_RGB else img.convert(mode)


@pytest.fixture
def make_image_bytes() -> Callable[..., bytes]:
    """Factory encoding a gradient image in the requested format."""

    def _make(
        size: tuple[int, int] = (160, 120),
        fmt: str = "JPEG",
        mode: str = COLOR_MODE_RGB,
    ) -> bytes:
        buffer = io.BytesIO()
        gradient_image(size, mode).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest.fixture
def jpeg_bytes(make_image_bytes: Callable[..., bytes]) -> bytes:
    """A 160x120 gradient JPEG."""
    return make_image_bytes()


@pytest.fixture
def png_bytes(make_image_bytes: Callable[..., bytes]) -> bytes:
    """A 64x48 gradient PNG with an alpha channel."""
    return make_image_bytes((64, 48), fmt="PNG", mode="RGBA")


@pytest.fixture
def make_montage_config() -> Callable[..., MontageConfig]:
    """
    Build MontageConfig instances with one placement per source.

    Placements may be given as plain source strings or as dicts with
    placement overrides.
    """

    def _build(
        *sources: str | dict[str, Any],
        **overrides: Any,  # noqa: ANN401
    ) -> MontageConfig:
        images = [
            {"source": s} if isinstance(s, str) else dict(s)
            for s in sources
        ]
        data: dict[str, Any] = {
            "id": "screen1",
            "name": "Screen 1",
            "width": 320,
            "height": 200,
            "rows": 1,
            "border": 2,
            "resize": "scale",
            "images": images,
        }
        data.update(overrides)
        return MontageConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the montage logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)


@pytest.fixture
def make_gradient() -> Callable[..., Image.Image]:
    """Expose gradient_image to test modules."""
    return gradient_image
