"""
Module: core.models.config

Purpose:
    Immutable tiling configuration shared by every command. Replaces
    ambient tile size / margin / spacing state with a single value that
    is built once per invocation and passed explicitly.

Key Classes:
    - TilingConfig: Tile size, margin, spacing, columns, background
    - InvalidConfigError: Value outside its valid range

Key Functions:
    - validate_pixel_value(): Check a value is in [0, 65535]
    - validate_positive_pixel_value(): Check a value is in [1, 65535]

Dependencies:
    - dataclasses (std)

Used By:
    - layout.grid: Geometry calculations
    - layout.packer: Canvas background and column count
    - extrude.extruder: Thickness validation
    - cli: Built from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

MAX_PIXEL_VALUE = 65535

DEFAULT_TILE_SIZE = 16
DEFAULT_COLUMNS = 10
TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)


class InvalidConfigError(ValueError):
    """A dimension, margin, spacing or thickness is out of range."""
    pass


def validate_pixel_value(value: int, name: str = "value") -> int:
    """
    Check that a pixel count is in [0, 65535].

    Args:
        value: Value to check
        name: Name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidConfigError: If value is out of range
    """
    if not isinstance(value, int) or value < 0 or value > MAX_PIXEL_VALUE:
        raise InvalidConfigError(
            f"{name} must be in range [0, {MAX_PIXEL_VALUE}]: {value!r}"
        )
    return value


def validate_positive_pixel_value(value: int, name: str = "value") -> int:
    """Check that a pixel count is in [1, 65535]."""
    if not isinstance(value, int) or value < 1 or value > MAX_PIXEL_VALUE:
        raise InvalidConfigError(
            f"{name} must be in range [1, {MAX_PIXEL_VALUE}]: {value!r}"
        )
    return value


@dataclass(frozen=True)
class TilingConfig:
    """
    Configuration for reading and writing a tileset (immutable).

    Attributes:
        tile_width: Tile width in pixels
        tile_height: Tile height in pixels
        margin: Border around the whole packed canvas
        spacing: Gap between adjacent tiles
        columns: Packing width in tiles
        background: RGBA fill for pixels not covered by a tile

    Example:
        >>> config = TilingConfig.square(8, margin=1, spacing=2)
        >>> config.tile_width, config.tile_height
        (8, 8)
    """

    tile_width: int = DEFAULT_TILE_SIZE
    tile_height: int = DEFAULT_TILE_SIZE
    margin: int = 0
    spacing: int = 0
    columns: int = DEFAULT_COLUMNS
    background: Tuple[int, int, int, int] = TRANSPARENT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        validate_positive_pixel_value(self.tile_width, "tile_width")
        validate_positive_pixel_value(self.tile_height, "tile_height")
        validate_pixel_value(self.margin, "margin")
        validate_pixel_value(self.spacing, "spacing")
        if not isinstance(self.columns, int) or self.columns < 1:
            raise InvalidConfigError(f"columns must be >= 1: {self.columns!r}")
        if len(self.background) != 4 or any(not 0 <= c <= 255 for c in self.background):
            raise InvalidConfigError(
                f"background must be an RGBA tuple of 0..255 values: {self.background!r}"
            )

    @classmethod
    def square(cls, tile_size: int, **kwargs) -> TilingConfig:
        """Build a config for square tiles."""
        return cls(tile_width=tile_size, tile_height=tile_size, **kwargs)

    def with_changes(self, **changes) -> TilingConfig:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)
