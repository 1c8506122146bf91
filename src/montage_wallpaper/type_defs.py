"""
Defines shared type aliases for the montage wallpaper engine.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import Literal

ResizePolicy = Literal["scale", "crop", "none", "height", "width"]
CodecName = Literal["pillow", "opencv"]
ResampleName = Literal[
    "nearest", "box", "bilinear", "hamming", "bicubic", "lanczos",
]
