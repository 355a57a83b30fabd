"""
Module: extrude

Purpose:
    Tile border extrusion for texture atlases.

Key Functions:
    - extrude_tile(): Extrude one tile
    - extrude_tileset(): Extrude a packed tileset

Dependencies:
    - numpy, PIL

Used By:
    - cli: extrude command
"""

from .extruder import ExtrusionResult, extrude_tile, extrude_tileset

__all__ = [
    "ExtrusionResult",
    "extrude_tile",
    "extrude_tileset",
]
