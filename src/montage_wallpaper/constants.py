"""
Constants used internally by the montage wallpaper engine.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# JPEG quality bounds accepted by both codecs
JPEG_QUALITY_MIN = 1
JPEG_QUALITY_MAX = 100

# JPEG start-of-image marker, checked before the fast decoder runs
JPEG_SOI_MARKER = b"\xff\xd8\xff"

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"
COLOR_BLACK = (0, 0, 0)
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Limits mirrored from the wallpaper node configuration
MIN_SIDE = 16
MAX_WIDTH = 4096
MAX_HEIGHT = 2160
MAX_BORDER = 100
MAX_ROWS = 5
