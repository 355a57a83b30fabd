import pytest
import sys
from pathlib import Path

import numpy as np
from PIL import Image

# Add src to sys.path so we can import tile_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


MARKER = (255, 255, 255, 255)


def _palette_color(index: int):
    """Distinct opaque color per index."""
    return (index * 13 % 256, 40 + index * 7 % 200, 200 - index * 11 % 200, 255)


@pytest.fixture
def make_tile():
    """
    Factory for solid tiles with a single marker pixel.

    The default marker at (1, 0) is not fixed by any flip or rotation,
    so such a tile never equals one of its own variants.
    """
    def _make(index: int, size: int = 8, marker=(1, 0), marker_color=MARKER) -> Image.Image:
        arr = np.zeros((size, size, 4), dtype=np.uint8)
        arr[:, :] = _palette_color(index)
        if marker is not None:
            x, y = marker
            arr[y, x] = marker_color
        return Image.fromarray(arr)
    return _make


@pytest.fixture
def make_grid():
    """Factory assembling a list of tile rows into one edge-to-edge image."""
    def _make(rows) -> Image.Image:
        th = rows[0][0].height
        tw = rows[0][0].width
        canvas = Image.new("RGBA", (tw * len(rows[0]), th * len(rows)), (0, 0, 0, 0))
        for r, row in enumerate(rows):
            for c, tile in enumerate(row):
                canvas.paste(tile, (c * tw, r * th))
        return canvas
    return _make


@pytest.fixture
def sample_tileset(make_tile, make_grid):
    """4x4 grid of 8x8 tiles with two planted duplicates.

    Tile (row 1, col 3) equals tile (row 0, col 0); tile (row 2, col 1)
    is tile (row 0, col 1) rotated 180 degrees.
    """
    rows = [[make_tile(r * 4 + c) for c in range(4)] for r in range(4)]
    rows[1][3] = rows[0][0].copy()
    rows[2][1] = rows[0][1].transpose(Image.Transpose.ROTATE_180)
    return make_grid(rows)
