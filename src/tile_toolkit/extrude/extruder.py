"""
Module: extrude.extruder

Purpose:
    Extrude tile borders: copy each tile's edge pixels outward so that
    texture filtering and mipmapping sample the tile's own colors instead
    of its neighbours'. Edges are clamped (not mirrored or wrapped) and
    each corner block is a flat fill of the matching corner pixel.

Key Functions:
    - extrude_tile(): Extrude a single tile image
    - extrude_tileset(): Extrude every tile of a packed tileset

Key Classes:
    - ExtrusionResult: Extruded tileset plus its effective margin/spacing

Dependencies:
    - numpy: Pixel array slicing
    - PIL.Image: Raster conversion
    - images.cropper: Reading the source tileset
    - layout.packer: Writing the extruded tileset

Used By:
    - cli: extrude command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image

from tile_toolkit.core.models import TilingConfig, validate_pixel_value
from tile_toolkit.images.cropper import read_tileset
from tile_toolkit.layout.packer import pack_tiles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtrusionResult:
    """
    Extruded tileset.

    Attributes:
        image: Packed tileset of extruded tiles
        tile_count: Number of tiles extruded
        margin: Margin around the original tile content
        spacing: Spacing between original tile contents
    """
    image: Image.Image
    tile_count: int
    margin: int
    spacing: int


def extrude_tile(tile: Image.Image, thickness: int) -> Image.Image:
    """
    Grow a tile by thickness pixels on every side.

    The tile is copied to (thickness, thickness). The first and last rows
    are repeated above and below, the first and last columns left and
    right, and every thickness x thickness corner block is filled with
    the source corner pixel. Thickness is not validated here.

    Args:
        tile: Source tile image
        thickness: Border width in pixels (0 returns a plain copy)

    Returns:
        New RGBA image of size (width + 2*thickness, height + 2*thickness)

    Example:
        >>> extrude_tile(Image.new("RGBA", (16, 16)), 2).size
        (20, 20)
    """
    src = np.asarray(tile.convert("RGBA"), dtype=np.uint8)
    if thickness == 0:
        return Image.fromarray(src.copy())

    t = thickness
    h, w = src.shape[:2]
    out = np.zeros((h + 2 * t, w + 2 * t, 4), dtype=np.uint8)

    out[t:t + h, t:t + w] = src

    # Top and bottom, over the original horizontal span
    out[:t, t:t + w] = src[0]
    out[t + h:, t:t + w] = src[h - 1]

    # Left and right, over the original vertical span
    out[t:t + h, :t] = src[:, :1]
    out[t:t + h, t + w:] = src[:, w - 1:]

    # Corners
    out[:t, :t] = src[0, 0]
    out[:t, t + w:] = src[0, w - 1]
    out[t + h:, :t] = src[h - 1, 0]
    out[t + h:, t + w:] = src[h - 1, w - 1]

    return Image.fromarray(out)


def extrude_tileset(
    image: Image.Image,
    config: TilingConfig,
    thickness: int,
) -> ExtrusionResult:
    """
    Extrude every tile of a packed tileset.

    The tileset is read with config's tile size, margin and spacing, each
    tile is extruded, and the result is packed with the same margin,
    spacing and column count. The original tile content then sits at
    margin + thickness with spacing + 2*thickness between tiles.

    Args:
        image: Packed tileset raster
        config: Geometry of the input tileset and output background
        thickness: Extrusion thickness in pixels

    Returns:
        ExtrusionResult with the new image and effective geometry

    Raises:
        InvalidConfigError: If thickness is outside [0, 65535]
        GeometryMismatchError: If image does not match config
    """
    validate_pixel_value(thickness, "thickness")

    tiles, columns = read_tileset(image, config)
    logger.info(f"Extruding {len(tiles)} tiles with thickness: {thickness}")

    extruded = [extrude_tile(tile, thickness) for tile in tiles]
    out_config = config.with_changes(
        tile_width=config.tile_width + 2 * thickness,
        tile_height=config.tile_height + 2 * thickness,
        columns=columns,
    )
    packed = pack_tiles(extruded, out_config)

    return ExtrusionResult(
        image=packed,
        tile_count=len(tiles),
        margin=config.margin + thickness,
        spacing=config.spacing + 2 * thickness,
    )
