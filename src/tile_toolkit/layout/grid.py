"""
Module: layout.grid

Purpose:
    Pure tileset geometry. Translates between (row, column) tile indices
    and pixel coordinates, computes packed canvas sizes, and infers the
    row/column count of an existing tileset from its pixel dimensions.
    No pixel access happens here.

Key Classes:
    - GridLayout: Geometry bound to one TilingConfig
    - GeometryMismatchError: Image does not divide into whole tiles
    - EmptyTileSetError: Canvas requested for zero tiles

Dependencies:
    - core.models: TilingConfig, TilePoint, TileRect

Used By:
    - images.cropper: Reading packed tilesets
    - layout.packer: Writing packed tilesets
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from tile_toolkit.core.models import InvalidConfigError, TilingConfig, TilePoint, TileRect


class GeometryMismatchError(ValueError):
    """
    Image dimension is not a whole number of tiles.

    Attributes:
        dimension: "width" or "height"
        image_size: Offending image dimension in pixels
        tile_size: Tile size along that dimension
        margin: Configured margin
        spacing: Configured spacing
    """

    def __init__(
        self,
        dimension: str,
        image_size: int,
        tile_size: int,
        margin: int,
        spacing: int,
    ) -> None:
        self.dimension = dimension
        self.image_size = image_size
        self.tile_size = tile_size
        self.margin = margin
        self.spacing = spacing
        super().__init__(
            f"bad margin, spacing, or tile size for image {dimension}: "
            f"margin: {margin}, spacing: {spacing}, tile size: {tile_size}, "
            f"image {dimension}: {image_size}"
        )


class EmptyTileSetError(ValueError):
    """No tiles to lay out."""
    pass


class GridLayout:
    """
    Tile geometry for a single TilingConfig.

    A tile at (row, column) starts at
    ``(column * (tile_width + spacing) + margin, row * (tile_height + spacing) + margin)``.

    Example:
        >>> grid = GridLayout(TilingConfig.square(8, margin=1, spacing=2))
        >>> grid.tile_position(1, 2)
        TilePoint(x=21, y=11)
        >>> grid.canvas_dimensions(4, columns=2)
        (20, 20)
    """

    def __init__(self, config: TilingConfig) -> None:
        self.config = config

    # ─────────────────────────────────────────────────────────────────────────
    # Tile coordinates
    # ─────────────────────────────────────────────────────────────────────────

    def tile_position(self, row: int, column: int) -> TilePoint:
        """Pixel origin of the tile at (row, column)."""
        c = self.config
        x = column * (c.tile_width + c.spacing) + c.margin
        y = row * (c.tile_height + c.spacing) + c.margin
        return TilePoint(x, y)

    def tile_rectangle(self, row: int, column: int) -> TileRect:
        """Pixel rectangle covered by the tile at (row, column)."""
        pos = self.tile_position(row, column)
        return TileRect(
            left=pos.x,
            top=pos.y,
            right=pos.x + self.config.tile_width,
            bottom=pos.y + self.config.tile_height,
        )

    def positions(self, rows: int, columns: int) -> Iterator[Tuple[int, int]]:
        """Yield (row, column) pairs in row-major order."""
        for row in range(rows):
            for column in range(columns):
                yield row, column

    # ─────────────────────────────────────────────────────────────────────────
    # Canvas sizing
    # ─────────────────────────────────────────────────────────────────────────

    def resolve_columns(self, columns: Optional[int] = None) -> int:
        """Packing width in tiles, falling back to config.columns."""
        if columns is None:
            return self.config.columns
        if not isinstance(columns, int) or columns < 1:
            raise InvalidConfigError(f"columns must be >= 1: {columns!r}")
        return columns

    def rows_for(self, tile_count: int, columns: Optional[int] = None) -> int:
        """Number of rows needed to hold tile_count tiles."""
        columns = self.resolve_columns(columns)
        return -(-tile_count // columns)

    def canvas_dimensions(
        self,
        tile_count: int,
        columns: Optional[int] = None,
    ) -> Tuple[int, int]:
        """
        Size of a packed canvas holding tile_count tiles.

        Args:
            tile_count: Number of tiles to pack
            columns: Packing width in tiles (defaults to config.columns)

        Returns:
            (width, height) in pixels

        Raises:
            EmptyTileSetError: If tile_count < 1
            InvalidConfigError: If columns is given and < 1
        """
        if tile_count < 1:
            raise EmptyTileSetError("cannot size a tileset canvas for zero tiles")
        c = self.config
        columns = self.resolve_columns(columns)
        rows = self.rows_for(tile_count, columns)
        width = columns * (c.tile_width + c.spacing) - c.spacing + 2 * c.margin
        height = rows * (c.tile_height + c.spacing) - c.spacing + 2 * c.margin
        return width, height

    # ─────────────────────────────────────────────────────────────────────────
    # Inference
    # ─────────────────────────────────────────────────────────────────────────

    def infer_grid(self, image_width: int, image_height: int) -> Tuple[int, int]:
        """
        Infer (rows, columns) of a packed tileset from its pixel size.

        Exact division only: a remainder means the margin, spacing or tile
        size does not describe this image.

        Raises:
            GeometryMismatchError: If either dimension does not divide
        """
        c = self.config
        columns = self._count_along("width", image_width, c.tile_width)
        rows = self._count_along("height", image_height, c.tile_height)
        return rows, columns

    def _count_along(self, dimension: str, image_size: int, tile_size: int) -> int:
        c = self.config
        tileable = image_size + c.spacing - 2 * c.margin
        unit = tile_size + c.spacing
        if tileable <= 0 or tileable % unit != 0:
            raise GeometryMismatchError(dimension, image_size, tile_size, c.margin, c.spacing)
        return tileable // unit
