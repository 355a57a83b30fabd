"""
Tests for images.transforms

Test Coverage:
- SEARCH_ORDER: fixed order, no identity, no duplicates
- Transform.apply(): pixel mapping, input not modified
- transform_by_name(): lookup and unknown names
- tile_digest(): equality follows pixels
"""

import pytest
from PIL import Image

from tile_toolkit.images.transforms import (
    IDENTITY,
    SEARCH_ORDER,
    Flip,
    Rotation,
    Transform,
    tile_digest,
    transform_by_name,
)


class TestSearchOrder:

    def test_search_order_has_eleven_non_identity_transforms(self):
        assert len(SEARCH_ORDER) == 11
        assert IDENTITY not in SEARCH_ORDER
        assert len(set(SEARCH_ORDER)) == 11

    def test_search_order_is_fixed(self):
        assert [t.name for t in SEARCH_ORDER] == [
            "flipH-rotate90",
            "flipH-rotate180",
            "flipH-rotate270",
            "flipV-rotate90",
            "flipV-rotate180",
            "flipV-rotate270",
            "none-rotate90",
            "none-rotate180",
            "none-rotate270",
            "flipH-none",
            "flipV-none",
        ]


class TestTransformApply:

    def test_apply_flip_horizontal_mirrors_columns(self, make_tile):
        tile = make_tile(0, size=4, marker=(0, 0))
        out = Transform(Flip.HORIZONTAL, Rotation.NONE).apply(tile)
        assert out.getpixel((3, 0)) == tile.getpixel((0, 0))

    def test_apply_flip_vertical_mirrors_rows(self, make_tile):
        tile = make_tile(0, size=4, marker=(0, 0))
        out = Transform(Flip.VERTICAL, Rotation.NONE).apply(tile)
        assert out.getpixel((0, 3)) == tile.getpixel((0, 0))

    def test_apply_rotate90_is_counter_clockwise(self, make_tile):
        tile = make_tile(0, size=4, marker=(3, 0))
        out = Transform(Flip.NONE, Rotation.ROTATE_90).apply(tile)
        # Top-right corner moves to top-left
        assert out.getpixel((0, 0)) == tile.getpixel((3, 0))

    def test_apply_flip_then_rotate(self, make_tile):
        tile = make_tile(0, size=4, marker=(1, 0))
        combined = Transform(Flip.HORIZONTAL, Rotation.ROTATE_180).apply(tile)
        expected = Transform(Flip.VERTICAL, Rotation.NONE).apply(tile)
        assert combined.tobytes() == expected.tobytes()

    def test_apply_rotate90_of_rectangle_swaps_size(self):
        out = Transform(Flip.NONE, Rotation.ROTATE_90).apply(Image.new("RGBA", (8, 4)))
        assert out.size == (4, 8)

    def test_apply_does_not_modify_input(self, make_tile):
        tile = make_tile(0)
        before = tile.tobytes()
        for t in SEARCH_ORDER:
            t.apply(tile)
        assert tile.tobytes() == before

    def test_apply_identity_returns_copy(self, make_tile):
        tile = make_tile(0)
        out = IDENTITY.apply(tile)
        assert out is not tile
        assert out.tobytes() == tile.tobytes()

    def test_asymmetric_tile_differs_from_every_variant(self, make_tile):
        tile = make_tile(5)
        base = tile_digest(tile)
        assert all(tile_digest(t.apply(tile)) != base for t in SEARCH_ORDER)


class TestTransformByName:

    def test_transform_by_name_when_known_then_returns(self):
        t = transform_by_name("flipV-rotate270")
        assert t == Transform(Flip.VERTICAL, Rotation.ROTATE_270)

    def test_transform_by_name_when_identity_then_returns_identity(self):
        assert transform_by_name("none-none") is IDENTITY

    def test_transform_by_name_when_unknown_then_raises(self):
        with pytest.raises(KeyError, match="Unknown transform"):
            transform_by_name("spin-rotate45")


class TestTileDigest:

    def test_tile_digest_when_equal_pixels_then_equal(self, make_tile):
        assert tile_digest(make_tile(3)) == tile_digest(make_tile(3))

    def test_tile_digest_when_one_pixel_differs_then_differs(self, make_tile):
        assert tile_digest(make_tile(3)) != tile_digest(make_tile(3, marker=(2, 0)))

    def test_tile_digest_when_rgb_then_matches_rgba_equivalent(self):
        rgb = Image.new("RGB", (2, 2), (5, 6, 7))
        rgba = Image.new("RGBA", (2, 2), (5, 6, 7, 255))
        assert tile_digest(rgb) == tile_digest(rgba)

    def test_tile_digest_is_md5_hex(self, make_tile):
        digest = tile_digest(make_tile(0))
        assert len(digest) == 32
        int(digest, 16)
