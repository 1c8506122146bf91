"""Tests for resize policies and drawing into the canvas."""

from collections.abc import Callable

import pytest
from PIL import Image

from montage_wallpaper import compositor
from montage_wallpaper.canvas import Canvas
from montage_wallpaper.layout import ResolvedPlacement

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255)


@pytest.fixture
def wide_image() -> Image.Image:
    """A 200x100 solid blue image."""
    return Image.new("RGB", (200, 100), BLUE)


@pytest.mark.parametrize(
    ("policy", "expected"),
    [
        ("width", (50, 25)),
        ("height", (120, 60)),
        ("crop", (50, 60)),
        ("scale", (50, 60)),
        ("none", (200, 100)),
    ],
)
def test_resize_policies(
    wide_image: Image.Image,
    policy: str,
    expected: tuple[int, int],
) -> None:
    resized = compositor.resize_image(
        wide_image, (50, 60), policy,  # type: ignore[arg-type]
    )
    assert resized.size == expected


@pytest.mark.parametrize("size", [(1, 1), (13, 400), (640, 7)])
def test_scale_ignores_aspect(
    wide_image: Image.Image,
    size: tuple[int, int],
) -> None:
    assert compositor.resize_image(wide_image, size, "scale").size == size


def test_none_returns_source(wide_image: Image.Image) -> None:
    assert compositor.resize_image(wide_image, (5, 5), "none") is wide_image


def test_crop_keeps_center(make_gradient: Callable[..., Image.Image]) -> None:
    """Crop trims both sides of a wide image, keeping the middle."""
    src = make_gradient((300, 100))
    out = compositor.resize_image(src, (100, 100), "crop")
    left_red = out.getpixel((0, 50))[0]
    assert 60 < left_red < 110


def test_draw_replaces_pixels() -> None:
    """Drawing overwrites the rectangle, alpha included, and nothing else."""
    canvas = Image.new("RGBA", (40, 30), RED)
    src = Image.new("RGBA", (10, 10), (0, 0, 255, 0))
    placement = ResolvedPlacement("s", 5, 5, 10, 10, "scale")

    compositor.draw(canvas, src, placement)

    assert canvas.getpixel((5, 5)) == (0, 0, 255, 0)
    assert canvas.getpixel((14, 14)) == (0, 0, 255, 0)
    assert canvas.getpixel((4, 5)) == RED
    assert canvas.getpixel((15, 14)) == RED


def test_draw_clips_to_rectangle(wide_image: Image.Image) -> None:
    """Overflow of a proportional resize does not spill out of the cell."""
    canvas = Image.new("RGBA", (100, 100), RED)
    placement = ResolvedPlacement("s", 10, 10, 20, 40, "height")

    compositor.draw(canvas, wide_image, placement)

    assert canvas.getpixel((29, 49)) == (*BLUE, 255)
    assert canvas.getpixel((30, 20)) == RED
    assert canvas.getpixel((20, 50)) == RED


def test_draw_smaller_image_leaves_rest(wide_image: Image.Image) -> None:
    """A shorter result only replaces the part it covers."""
    canvas = Image.new("RGBA", (100, 100), RED)
    placement = ResolvedPlacement("s", 0, 0, 40, 40, "width")

    compositor.draw(canvas, wide_image, placement)

    assert canvas.getpixel((39, 19)) == (*BLUE, 255)
    assert canvas.getpixel((10, 30)) == RED


def test_draw_clips_to_canvas(wide_image: Image.Image) -> None:
    canvas = Image.new("RGBA", (50, 50), RED)
    placement = ResolvedPlacement("s", 40, 45, 30, 30, "scale")

    compositor.draw(canvas, wide_image, placement)

    assert canvas.size == (50, 50)
    assert canvas.getpixel((49, 49)) == (*BLUE, 255)
    assert canvas.getpixel((39, 49)) == RED


def test_resample_filter_names() -> None:
    assert compositor.resample_filter("lanczos") is Image.Resampling.LANCZOS
    assert compositor.resample_filter("nearest") is Image.Resampling.NEAREST


def test_canvas_starts_transparent_black() -> None:
    canvas = Canvas(8, 6)
    assert canvas.size == (8, 6)
    assert canvas.image.mode == "RGBA"
    assert canvas.image.getextrema() == ((0, 0), (0, 0), (0, 0), (0, 0))


def test_canvas_region_is_a_copy(wide_image: Image.Image) -> None:
    canvas = Canvas(30, 30)
    placement = ResolvedPlacement("s", 2, 2, 10, 10, "crop")
    before = canvas.region(placement)

    canvas.draw(wide_image, placement)

    assert before.getpixel((0, 0)) == (0, 0, 0, 0)
    assert canvas.region(placement).getpixel((0, 0)) == (*BLUE, 255)
