"""Shared default values for user-facing configuration settings."""
from montage_wallpaper.type_defs import CodecName, ResampleName, ResizePolicy

# Montage geometry
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_BORDER = 1
DEFAULT_ROWS = 1
DEFAULT_RESIZE: ResizePolicy = "scale"

# Output
DEFAULT_JPEG_QUALITY = 80
DEFAULT_PUBLISH = False
DEFAULT_FILENAME = ""

# Sources
DEFAULT_POLL_INTERVAL = 900  # seconds, used by the fetch layer only

# Codec and resampling
DEFAULT_CODEC: CodecName = "pillow"
DEFAULT_RESAMPLE: ResampleName = "bicubic"
