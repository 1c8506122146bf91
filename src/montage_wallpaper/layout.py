"""
Grid layout for montage placements.

Resolves each declared placement to an absolute rectangle on the canvas.
This is a simple grid that does not look at the images themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from montage_wallpaper.errors import ConfigError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from montage_wallpaper.config import ImagePlacement, MontageConfig
    from montage_wallpaper.type_defs import ResizePolicy


@dataclass(frozen=True)
class ResolvedPlacement:
    """Absolute rectangle and effective resize policy of one source."""

    source: str
    x: int
    y: int
    width: int
    height: int
    resize: ResizePolicy

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Return (left, upper, right, lower) as used by PIL."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height


def grid_columns(count: int, rows: int) -> int:
    """Return the number of columns needed for count images in rows."""
    return max(1, -(-count // rows))


def cell_height(config: MontageConfig) -> int:
    """Height shared by every cell, borders excluded."""
    return (config.height - config.border) // config.rows - config.border


def row_widths(
    config: MontageConfig,
    row: Sequence[ImagePlacement],
    cols: int,
) -> list[int]:
    """
    Return the width of each placement in one grid row.

    An explicit width is taken as is. Automatic cells split whatever
    width is left evenly among the columns not placed yet, so a row of
    automatic cells always ends exactly at the right border.
    """
    widths: list[int] = []
    for c, placement in enumerate(row):
        if placement.width > 0:
            widths.append(placement.width)
            continue
        x = config.border + sum(widths) + config.border * c
        remaining = cols - c
        widths.append(
            (config.width - x - config.border * remaining) // remaining,
        )
    return widths


def resolve_layout(
    config: MontageConfig,
    placements: Sequence[ImagePlacement] | None = None,
) -> list[ResolvedPlacement]:
    """
    Lay the placements out on a row-major grid.

    Args:
        config: Montage settings providing canvas size, border and rows.
        placements: Declared placements, defaults to ``config.images``.

    Returns:
        One resolved placement per placed declaration, in declaration
        order. Declarations that do not fit the grid are dropped.

    Raises:
        ConfigError: If a cell would have no width or height.

    """
    declared = list(config.images if placements is None else placements)
    cols = grid_columns(len(declared), config.rows)
    height = cell_height(config)
    if height <= 0:
        msg = (f"Montage '{config.label}' leaves no room for rows: "
               f"{config.rows} rows of height {height}px")
        raise ConfigError(msg)

    resolved: list[ResolvedPlacement] = []
    for r in range(config.rows):
        row = declared[r * cols:(r + 1) * cols]
        if not row:
            break
        y = config.border + r * (height + config.border)
        x = config.border
        for placement, width in zip(
                row, row_widths(config, row, cols), strict=True):
            if width <= 0:
                msg = (f"Montage '{config.label}' leaves no room for "
                       f"'{placement.source}': width {width}px")
                raise ConfigError(msg)
            resolved.append(ResolvedPlacement(
                source=placement.source,
                x=x + placement.x,
                y=y + placement.y,
                width=width,
                height=height,
                resize=placement.resize or config.resize,
            ))
            x += width + config.border
    return resolved
