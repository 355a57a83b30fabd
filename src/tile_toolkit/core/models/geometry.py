"""
Module: core.models.geometry

Purpose:
    Pixel coordinate value types used by the grid layout and cropper.

Key Classes:
    - TilePoint: Pixel coordinate of a tile origin
    - TileRect: Pixel rectangle covered by one tile

Dependencies:
    - dataclasses (std)

Used By:
    - layout.grid
    - images.cropper
    - core.models.records
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TilePoint:
    """Pixel coordinate, origin at the image top-left."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, slots=True)
class TileRect:
    """
    Pixel rectangle [left, right) x [top, bottom).

    Example:
        >>> rect = TileRect(left=8, top=0, right=16, bottom=8)
        >>> rect.width, rect.height
        (8, 8)
    """

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.right <= self.left:
            raise ValueError(f"right must be > left: {self.right} <= {self.left}")
        if self.bottom <= self.top:
            raise ValueError(f"bottom must be > top: {self.bottom} <= {self.top}")

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def origin(self) -> TilePoint:
        return TilePoint(self.left, self.top)

    def as_box(self) -> tuple[int, int, int, int]:
        """Get as (left, top, right, bottom) tuple for PIL."""
        return (self.left, self.top, self.right, self.bottom)
