"""
Core Models Package

Value types shared across the tiling pipeline.

Configuration and geometry values are frozen dataclasses; TileRecord is
the one mutable model since its count grows during a deduplication pass.
"""

from .config import (
    InvalidConfigError,
    TilingConfig,
    validate_pixel_value,
    validate_positive_pixel_value,
)
from .geometry import TilePoint, TileRect
from .records import TileCrop, TileRecord

__all__ = [
    "InvalidConfigError",
    "TilingConfig",
    "validate_pixel_value",
    "validate_positive_pixel_value",
    "TilePoint",
    "TileRect",
    "TileCrop",
    "TileRecord",
]
