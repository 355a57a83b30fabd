"""
Module: core.models.records

Purpose:
    Records produced while scanning a tileset: cropped tiles with their
    source origin, and the per-unique-tile frequency record.

Key Classes:
    - TileCrop: Cropped tile image plus its origin in the source
    - TileRecord: One unique tile with occurrence statistics

Dependencies:
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - images.cropper: Produces TileCrop
    - dedup.deduplicator: Produces TileRecord
    - report: Renders TileRecord rows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .geometry import TilePoint

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True)
class TileCrop:
    """
    A tile cut from a source raster.

    Attributes:
        image: Independent RGBA copy of the tile pixels
        origin: Top-left pixel of the tile in the source raster
    """
    image: Image.Image
    origin: TilePoint


@dataclass
class TileRecord:
    """
    A unique tile and how often it occurs.

    The representative image is always the base orientation of the
    first occurrence, never a transformed variant.

    Attributes:
        content_hash: Hex digest of the tile's RGBA bytes
        image: Representative tile image
        count: Number of occurrences (>= 1)
        first_location: Origin of the first occurrence in scan order
        required_transform: True if any occurrence matched only after
            flipping or rotating
    """
    content_hash: str
    image: Image.Image
    count: int
    first_location: TilePoint
    required_transform: bool = False
