"""
Centralized logging utilities for the montage wallpaper engine.

Every module logs through the shared ``logger`` defined here, so the
CLI can change verbosity in one place.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a handler on first use only.

    Args:
        name: Logger name.
        level: Logging level applied on every call.
        formatter: Formatter for the first handler, LOG_FORMAT if None.
        handler: Handler to attach, a stderr StreamHandler if None.

    Returns:
        The configured logger. It does not propagate to the root logger.

    """
    named = logging.getLogger(name)
    named.setLevel(level)
    if named.handlers:
        return named
    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    named.addHandler(handler)
    named.propagate = False
    return named


def set_verbosity(*, verbose: bool) -> None:
    """Switch the shared logger between INFO and DEBUG output."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger("montage_wallpaper")
