"""
Module: images.cropper

Purpose:
    Cut tile images out of a source raster. Two scans are supported:
    a column-major scan with pixel offsets for arbitrary images (used
    when searching for unique tiles), and a row-major scan of a packed
    tileset whose grid is inferred from margin and spacing.

Key Functions:
    - crop_tile(): Crop one rectangle as an independent copy
    - crop_tiles(): Column-major scan with x/y offset
    - read_tileset(): Row-major scan of a packed tileset

Dependencies:
    - PIL: Image cropping
    - layout.grid: GridLayout inference and rectangles

Used By:
    - dedup.deduplicator: Tile scan for frequency counting
    - extrude.extruder: Reading tiles to extrude
    - cli: respace command
"""

from __future__ import annotations

from typing import List, Tuple

from PIL import Image

from tile_toolkit.core.models import (
    TileCrop,
    TilePoint,
    TileRect,
    TilingConfig,
    validate_pixel_value,
)
from tile_toolkit.layout.grid import GridLayout


def crop_tile(image: Image.Image, rect: TileRect) -> Image.Image:
    """
    Crop a rectangle from a raster.

    Args:
        image: Source raster
        rect: Region to crop

    Returns:
        Independent RGBA copy of the region

    Raises:
        ValueError: If rect extends outside the image
    """
    if rect.left < 0 or rect.top < 0:
        raise ValueError(f"Tile {rect.as_box()} starts outside the image")
    if rect.right > image.width or rect.bottom > image.height:
        raise ValueError(
            f"Tile {rect.as_box()} exceeds image size {image.width}x{image.height}"
        )
    tile = image.crop(rect.as_box())
    if tile.mode != "RGBA":
        tile = tile.convert("RGBA")
    tile.load()
    return tile


def crop_tiles(
    image: Image.Image,
    config: TilingConfig,
    *,
    x_offset: int = 0,
    y_offset: int = 0,
) -> List[TileCrop]:
    """
    Scan an image for tiles, column by column.

    Margin and spacing are ignored; tiles are packed edge to edge starting
    at (x_offset, y_offset). Partial tiles at the right and bottom edges
    are dropped.

    Args:
        image: Source raster
        config: Supplies tile width and height
        x_offset: First pixel column to scan
        y_offset: First pixel row to scan

    Returns:
        TileCrops ordered by column, then row

    Raises:
        InvalidConfigError: If either offset is outside [0, 65535]

    Example:
        >>> crops = crop_tiles(img, TilingConfig.square(8))
        >>> crops[1].origin   # second tile is below the first
        TilePoint(x=0, y=8)
    """
    validate_pixel_value(x_offset, "x offset")
    validate_pixel_value(y_offset, "y offset")
    tw, th = config.tile_width, config.tile_height
    columns = max(0, (image.width - x_offset) // tw)
    rows = max(0, (image.height - y_offset) // th)

    crops: List[TileCrop] = []
    for column in range(columns):
        for row in range(rows):
            x = column * tw + x_offset
            y = row * th + y_offset
            rect = TileRect(left=x, top=y, right=x + tw, bottom=y + th)
            crops.append(TileCrop(image=crop_tile(image, rect), origin=TilePoint(x, y)))
    return crops


def read_tileset(
    image: Image.Image,
    config: TilingConfig,
) -> Tuple[List[Image.Image], int]:
    """
    Read every tile of a packed tileset in row-major order.

    Args:
        image: Packed tileset raster
        config: Tile size, margin and spacing the tileset was packed with

    Returns:
        Tuple of (tile images, inferred column count)

    Raises:
        GeometryMismatchError: If the image size does not match the config
    """
    grid = GridLayout(config)
    rows, columns = grid.infer_grid(image.width, image.height)
    tiles = [
        crop_tile(image, grid.tile_rectangle(row, column))
        for row, column in grid.positions(rows, columns)
    ]
    return tiles, columns
