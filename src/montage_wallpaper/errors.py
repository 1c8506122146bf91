"""Exception types raised by the montage engine."""


class MontageError(Exception):
    """Base class for montage failures."""


class ConfigError(MontageError, ValueError):
    """Montage geometry cannot be laid out on the canvas."""


class DecodeError(MontageError):
    """Raw image bytes could not be decoded."""


class EncodeError(MontageError):
    """The canvas could not be encoded to JPEG."""
