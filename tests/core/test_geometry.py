"""
Unit Tests for TilePoint / TileRect
"""

import pytest

from tile_toolkit.core.models import TilePoint, TileRect


def test_tile_rect_dimensions():
    rect = TileRect(left=8, top=4, right=16, bottom=12)
    assert rect.width == 8
    assert rect.height == 8
    assert rect.origin == TilePoint(8, 4)
    assert rect.as_box() == (8, 4, 16, 12)


def test_tile_rect_when_empty_width_then_raises():
    with pytest.raises(ValueError, match="right must be > left"):
        TileRect(left=4, top=0, right=4, bottom=8)


def test_tile_rect_when_empty_height_then_raises():
    with pytest.raises(ValueError, match="bottom must be > top"):
        TileRect(left=0, top=8, right=4, bottom=2)


def test_tile_point_str():
    assert str(TilePoint(16, 32)) == "(16,32)"
