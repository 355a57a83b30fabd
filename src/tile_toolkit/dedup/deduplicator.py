"""
Module: dedup.deduplicator

Purpose:
    Find the unique tiles of an image and count how often each occurs.
    Tiles can optionally be matched up to flips and rotations, so a tile
    and its mirror image share one record.

Key Functions:
    - compute_frequencies(): Frequency-ranked records for a tile sequence
    - deduplicate(): Crop an image and compute its unique tiles

Key Classes:
    - DeduplicationResult: All scanned tiles plus the ranked records

Dependencies:
    - PIL.Image: Tile images
    - images.cropper: Column-major tile scan
    - images.transforms: Transform search order and digest

Used By:
    - cli: parse command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from PIL import Image

from tile_toolkit.core.models import TileCrop, TileRecord, TilingConfig
from tile_toolkit.images.cropper import crop_tiles
from tile_toolkit.images.transforms import SEARCH_ORDER, Transform, tile_digest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeduplicationResult:
    """
    Outcome of one deduplication pass.

    Attributes:
        tiles: Every tile scanned, in scan order
        records: Unique tiles, most frequent first
    """
    tiles: List[TileCrop]
    records: List[TileRecord]

    @property
    def total(self) -> int:
        return len(self.tiles)

    @property
    def unique(self) -> int:
        return len(self.records)

    def images(self) -> List[Image.Image]:
        """Representative images in ranked order, ready for packing."""
        return [record.image for record in self.records]


def compute_frequencies(
    tiles: Sequence[TileCrop],
    transforms: Sequence[Transform] = (),
) -> List[TileRecord]:
    """
    Group identical tiles and rank them by occurrence.

    For each tile, transformed variants are tried first in the given order.
    A variant whose digest equals the tile's own digest is skipped, so a
    tile that is its own mirror image is never matched against itself.
    The first variant that hits a known record wins. Otherwise the tile's
    own digest is counted or registered as a new record.

    Args:
        tiles: Tiles in scan order
        transforms: Transforms to search; empty disables matching under
            flip/rotation

    Returns:
        Records sorted by count descending; ties keep first-seen order

    Example:
        >>> records = compute_frequencies(crop_tiles(img, config), SEARCH_ORDER)
        >>> records[0].count >= records[-1].count
        True
    """
    records: List[TileRecord] = []
    lookup: Dict[str, int] = {}

    for crop in tiles:
        base_hash = tile_digest(crop.image)

        matched = False
        for transform in transforms:
            variant = transform.apply(crop.image)
            # 90/270 rotations of non-square tiles cannot match a same-size tile
            if variant.size != crop.image.size:
                continue
            variant_hash = tile_digest(variant)
            if variant_hash == base_hash:
                continue

            index = lookup.get(variant_hash)
            if index is not None:
                record = records[index]
                record.count += 1
                record.required_transform = True
                matched = True
                logger.debug(
                    f"Tile at {crop.origin} matches tile at {record.first_location} "
                    f"via {transform.name}"
                )
                break

        if matched:
            continue

        index = lookup.get(base_hash)
        if index is not None:
            records[index].count += 1
        else:
            lookup[base_hash] = len(records)
            records.append(
                TileRecord(
                    content_hash=base_hash,
                    image=crop.image,
                    count=1,
                    first_location=crop.origin,
                )
            )

    # sorted() is stable, so equal counts keep insertion order
    return sorted(records, key=lambda r: r.count, reverse=True)


def deduplicate(
    image: Image.Image,
    config: TilingConfig,
    *,
    transform: bool = False,
    transforms: Sequence[Transform] = SEARCH_ORDER,
    x_offset: int = 0,
    y_offset: int = 0,
) -> DeduplicationResult:
    """
    Crop an image into tiles and find the unique ones.

    Args:
        image: Source raster
        config: Supplies the tile size
        transform: Match tiles under flips and rotations
        transforms: Transforms to try when transform is True
        x_offset: First pixel column to scan
        y_offset: First pixel row to scan

    Returns:
        DeduplicationResult with every tile and the ranked records
    """
    if logger.isEnabledFor(logging.INFO):
        tw, th = config.tile_width, config.tile_height
        logger.info(
            f"Parsing {image.width}x{image.height} image (offset by {x_offset}x{y_offset}) "
            f"for {tw}x{th} tiles with "
            f"{(image.width - x_offset) % tw}x{(image.height - y_offset) % th} remainder"
        )

    tiles = crop_tiles(image, config, x_offset=x_offset, y_offset=y_offset)
    search = tuple(transforms) if transform else ()
    records = compute_frequencies(tiles, search)

    logger.info(f"Parsed {len(tiles)} total tiles, {len(records)} unique")
    return DeduplicationResult(tiles=tiles, records=records)
