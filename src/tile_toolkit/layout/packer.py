"""
Module: layout.packer

Purpose:
    Lay an ordered sequence of tile images onto a new tileset canvas
    using GridLayout positions.

Key Functions:
    - pack_tiles(): Build a packed RGBA canvas from tile images

Dependencies:
    - PIL.Image: Canvas creation and pasting
    - layout.grid: Tile positions and canvas size

Used By:
    - dedup: Unique tile output
    - extrude.extruder: Extruded tileset output
    - cli: respace command
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PIL import Image

from tile_toolkit.core.models import TilingConfig

from .grid import EmptyTileSetError, GridLayout

logger = logging.getLogger(__name__)


def pack_tiles(
    tiles: Sequence[Image.Image],
    config: TilingConfig,
    *,
    columns: Optional[int] = None,
) -> Image.Image:
    """
    Pack tiles into a single tileset image.

    Tile ``i`` is placed at row ``i // columns``, column ``i % columns``.
    Pixels not covered by a tile keep ``config.background``.

    Args:
        tiles: Tile images in output order
        config: Tile size, margin, spacing and background
        columns: Packing width in tiles (defaults to config.columns)

    Returns:
        New RGBA image owned by the caller

    Raises:
        EmptyTileSetError: If tiles is empty
        InvalidConfigError: If columns is given and < 1

    Example:
        >>> canvas = pack_tiles(tiles, TilingConfig.square(16, columns=4))
    """
    if not tiles:
        raise EmptyTileSetError("no tiles to pack into a tileset")

    grid = GridLayout(config)
    columns = grid.resolve_columns(columns)
    width, height = grid.canvas_dimensions(len(tiles), columns)
    canvas = Image.new("RGBA", (width, height), config.background)

    for index, tile in enumerate(tiles):
        row, column = divmod(index, columns)
        pos = grid.tile_position(row, column)
        canvas.paste(tile.convert("RGBA"), (pos.x, pos.y))

    logger.debug(
        f"Packed {len(tiles)} tiles into {width}x{height} canvas "
        f"({columns} columns, margin {config.margin}, spacing {config.spacing})"
    )
    return canvas
