"""
Module: dedup

Purpose:
    Tile deduplication: content hashing, flip/rotation matching and
    frequency ranking.

Key Functions:
    - compute_frequencies(): Rank unique tiles of a tile sequence
    - deduplicate(): Crop and rank an image in one call

Dependencies:
    - PIL: Tile images
    - tile_toolkit.images: Cropping, transforms, digest

Used By:
    - cli: parse command
"""

from .deduplicator import DeduplicationResult, compute_frequencies, deduplicate

__all__ = [
    "DeduplicationResult",
    "compute_frequencies",
    "deduplicate",
]
