"""
Module: layout

Purpose:
    Tileset geometry and packing.

Key Classes:
    - GridLayout: Tile positions, canvas size, grid inference

Key Functions:
    - pack_tiles(): Lay tiles onto a new canvas

Dependencies:
    - PIL: Canvas creation
    - tile_toolkit.core.models: TilingConfig

Used By:
    - images.cropper, dedup, extrude, cli
"""

from .grid import GridLayout, GeometryMismatchError, EmptyTileSetError
from .packer import pack_tiles

__all__ = [
    "GridLayout",
    "GeometryMismatchError",
    "EmptyTileSetError",
    "pack_tiles",
]
