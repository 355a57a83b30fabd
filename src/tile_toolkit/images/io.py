"""
Module: images.io

Purpose:
    Read and write tileset rasters. All rasters handed to the rest of the
    package are RGBA with EXIF orientation already applied.

Key Functions:
    - open_raster(): Decode an image file into an RGBA raster
    - save_raster(): Encode a raster by file extension

Key Classes:
    - RasterIOError: Base class for read/write failures
    - RasterReadError: File missing or not decodable
    - RasterWriteError: Encoder or filesystem failure
    - UnsupportedOutputFormatError: Output extension not supported

Dependencies:
    - PIL.Image, PIL.ImageOps: Decoding, encoding, auto-orientation

Used By:
    - cli: Input and output of every command
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Extension -> Pillow format name
OUTPUT_FORMATS = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
    ".bmp": "BMP",
}

# Formats that cannot carry an alpha channel
_OPAQUE_FORMATS = {"JPEG", "BMP"}

VALID_OUTPUT_EXTENSIONS_MESSAGE = (
    'Valid extensions are: "jpg" (or "jpeg"), "png", "gif", "tif" (or "tiff") and "bmp".'
)


class RasterIOError(Exception):
    """Raster could not be read or written."""
    pass


class RasterReadError(RasterIOError):
    """Input image missing or not decodable."""
    pass


class RasterWriteError(RasterIOError):
    """Output image could not be written."""
    pass


class UnsupportedOutputFormatError(RasterIOError):
    """Output extension is not a supported image format."""
    pass


def open_raster(path: Union[str, Path]) -> Image.Image:
    """
    Open an image file as an RGBA raster.

    Args:
        path: Image file to read

    Returns:
        RGBA image with EXIF orientation applied

    Raises:
        RasterReadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    logger.info(f"Opening {path}")
    try:
        with Image.open(path) as img:
            oriented = ImageOps.exif_transpose(img)
            return oriented.convert("RGBA")
    except FileNotFoundError as e:
        raise RasterReadError(f"Image not found: {path}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise RasterReadError(f"Error opening file {path}: {e}") from e


def save_raster(image: Image.Image, path: Union[str, Path]) -> Path:
    """
    Save a raster, choosing the format from the file extension.

    Args:
        image: Raster to save
        path: Destination path; extension selects the format

    Returns:
        The path written

    Raises:
        UnsupportedOutputFormatError: If the extension is not supported
        RasterWriteError: If encoding or writing fails
    """
    path = Path(path)
    fmt = OUTPUT_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise UnsupportedOutputFormatError(
            f"the tileset could not be saved because the output extension "
            f"{path.suffix or '(none)'!s} is invalid. {VALID_OUTPUT_EXTENSIONS_MESSAGE}"
        )

    logger.info(f"Saving to {path}")
    out = image.convert("RGB") if fmt in _OPAQUE_FORMATS else image
    try:
        out.save(path, format=fmt)
    except (OSError, ValueError) as e:
        raise RasterWriteError(f"Error saving file {path}: {e}") from e
    return path
