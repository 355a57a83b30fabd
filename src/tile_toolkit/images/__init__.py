"""
Module: images

Purpose:
    Raster access for the tiling pipeline: file I/O, hex colors,
    tile cropping and flip/rotation transforms.

Key Functions:
    - open_raster() / save_raster(): File I/O
    - crop_tiles() / read_tileset(): Tile cropping
    - tile_digest(): Content hash of a tile

Key Classes:
    - Transform: Flip + rotation pair

Dependencies:
    - PIL: Image manipulation
    - tile_toolkit.layout.grid: Tileset geometry

Used By:
    - dedup, extrude, cli
"""

from .io import (
    open_raster,
    save_raster,
    RasterIOError,
    RasterReadError,
    RasterWriteError,
    UnsupportedOutputFormatError,
    VALID_OUTPUT_EXTENSIONS_MESSAGE,
)
from .color import color_from_hex, hex_from_color
from .cropper import crop_tile, crop_tiles, read_tileset
from .transforms import (
    Flip,
    Rotation,
    Transform,
    IDENTITY,
    SEARCH_ORDER,
    tile_digest,
    transform_by_name,
)

__all__ = [
    # I/O
    "open_raster",
    "save_raster",
    "RasterIOError",
    "RasterReadError",
    "RasterWriteError",
    "UnsupportedOutputFormatError",
    "VALID_OUTPUT_EXTENSIONS_MESSAGE",
    # Color
    "color_from_hex",
    "hex_from_color",
    # Cropping
    "crop_tile",
    "crop_tiles",
    "read_tileset",
    # Transforms
    "Flip",
    "Rotation",
    "Transform",
    "IDENTITY",
    "SEARCH_ORDER",
    "tile_digest",
    "transform_by_name",
]
