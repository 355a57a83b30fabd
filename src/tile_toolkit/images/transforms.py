"""
Module: images.transforms

Purpose:
    Closed set of flip/rotation transforms used to match tiles that are
    identical up to reflection or rotation, plus the content digest used
    to compare tiles.

Key Classes:
    - Flip: none / horizontal / vertical
    - Rotation: none / 90 / 180 / 270 degrees counter-clockwise
    - Transform: A flip followed by a rotation

Key Functions:
    - tile_digest(): md5 hex digest of a tile's RGBA bytes

Constants:
    - SEARCH_ORDER: Fixed order in which transforms are tried

Dependencies:
    - PIL.Image: Image.transpose
    - hashlib (std)

Used By:
    - dedup.deduplicator: Transform search
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from PIL import Image


class Flip(Enum):
    NONE = "none"
    HORIZONTAL = "flipH"
    VERTICAL = "flipV"

    @property
    def method(self) -> Optional[Image.Transpose]:
        return _FLIP_METHODS[self]


class Rotation(Enum):
    NONE = "none"
    ROTATE_90 = "rotate90"
    ROTATE_180 = "rotate180"
    ROTATE_270 = "rotate270"

    @property
    def method(self) -> Optional[Image.Transpose]:
        return _ROTATION_METHODS[self]


_FLIP_METHODS = {
    Flip.NONE: None,
    Flip.HORIZONTAL: Image.Transpose.FLIP_LEFT_RIGHT,
    Flip.VERTICAL: Image.Transpose.FLIP_TOP_BOTTOM,
}

# Pillow rotates counter-clockwise
_ROTATION_METHODS = {
    Rotation.NONE: None,
    Rotation.ROTATE_90: Image.Transpose.ROTATE_90,
    Rotation.ROTATE_180: Image.Transpose.ROTATE_180,
    Rotation.ROTATE_270: Image.Transpose.ROTATE_270,
}


@dataclass(frozen=True)
class Transform:
    """
    A flip followed by a rotation.

    Example:
        >>> t = Transform(Flip.HORIZONTAL, Rotation.ROTATE_90)
        >>> t.name
        'flipH-rotate90'
        >>> t.apply(tile).size == tile.size[::-1]
        True
    """
    flip: Flip
    rotation: Rotation

    @property
    def name(self) -> str:
        return f"{self.flip.value}-{self.rotation.value}"

    @property
    def is_identity(self) -> bool:
        return self.flip is Flip.NONE and self.rotation is Rotation.NONE

    def apply(self, image: Image.Image) -> Image.Image:
        """Return a transformed copy; the input is not modified."""
        out = image
        if self.flip.method is not None:
            out = out.transpose(self.flip.method)
        if self.rotation.method is not None:
            out = out.transpose(self.rotation.method)
        if out is image:
            out = image.copy()
        return out

    def __str__(self) -> str:
        return self.name


IDENTITY = Transform(Flip.NONE, Rotation.NONE)

# Every flip/rotation pair except the identity, in the order they are tried.
SEARCH_ORDER: Tuple[Transform, ...] = (
    Transform(Flip.HORIZONTAL, Rotation.ROTATE_90),
    Transform(Flip.HORIZONTAL, Rotation.ROTATE_180),
    Transform(Flip.HORIZONTAL, Rotation.ROTATE_270),
    Transform(Flip.VERTICAL, Rotation.ROTATE_90),
    Transform(Flip.VERTICAL, Rotation.ROTATE_180),
    Transform(Flip.VERTICAL, Rotation.ROTATE_270),
    Transform(Flip.NONE, Rotation.ROTATE_90),
    Transform(Flip.NONE, Rotation.ROTATE_180),
    Transform(Flip.NONE, Rotation.ROTATE_270),
    Transform(Flip.HORIZONTAL, Rotation.NONE),
    Transform(Flip.VERTICAL, Rotation.NONE),
)


def transform_by_name(name: str) -> Transform:
    """
    Look up a transform by its "flip-rotation" name.

    Raises:
        KeyError: If name is not a known transform
    """
    for t in SEARCH_ORDER + (IDENTITY,):
        if t.name == name:
            return t
    raise KeyError(f"Unknown transform: {name}")


def tile_digest(image: Image.Image) -> str:
    """
    Hex digest of the tile's contiguous RGBA pixel bytes.

    Rows are packed with no padding, so equal digests mean equal pixels
    and equal dimensions in practice.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return hashlib.md5(image.tobytes()).hexdigest()
