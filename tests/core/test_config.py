"""
Unit Tests for TilingConfig

Test Coverage:
- Construction defaults and validation ranges
- square() and with_changes() helpers
- validate_pixel_value() / validate_positive_pixel_value()
"""

import pytest

from tile_toolkit.core.models import (
    InvalidConfigError,
    TilingConfig,
    validate_pixel_value,
    validate_positive_pixel_value,
)


class TestTilingConfig:
    """Tests for TilingConfig dataclass."""

    def test_init_when_defaults_then_matches_tool_defaults(self):
        """Defaults are 16px tiles, no margin/spacing, 10 columns, transparent."""
        config = TilingConfig()
        assert config.tile_width == 16
        assert config.tile_height == 16
        assert config.margin == 0
        assert config.spacing == 0
        assert config.columns == 10
        assert config.background == (0, 0, 0, 0)

    def test_square_when_called_then_sets_both_dimensions(self):
        config = TilingConfig.square(8, margin=2)
        assert (config.tile_width, config.tile_height) == (8, 8)
        assert config.margin == 2

    def test_init_when_zero_tile_size_then_raises(self):
        with pytest.raises(InvalidConfigError, match="tile_width"):
            TilingConfig(tile_width=0)

    def test_init_when_tile_size_too_large_then_raises(self):
        with pytest.raises(InvalidConfigError, match="tile_height"):
            TilingConfig(tile_height=65536)

    def test_init_when_negative_margin_then_raises(self):
        with pytest.raises(InvalidConfigError, match="margin"):
            TilingConfig(margin=-1)

    def test_init_when_negative_spacing_then_raises(self):
        with pytest.raises(InvalidConfigError, match="spacing"):
            TilingConfig(spacing=-3)

    def test_init_when_zero_columns_then_raises(self):
        with pytest.raises(InvalidConfigError, match="columns"):
            TilingConfig(columns=0)

    def test_init_when_bad_background_then_raises(self):
        with pytest.raises(InvalidConfigError, match="background"):
            TilingConfig(background=(0, 0, 0))

    def test_init_when_bounds_inclusive_then_accepts(self):
        config = TilingConfig(tile_width=65535, tile_height=1, margin=65535, spacing=0)
        assert config.tile_width == 65535

    def test_invalid_config_is_value_error(self):
        with pytest.raises(ValueError):
            TilingConfig(margin=70000)

    def test_with_changes_when_called_then_original_untouched(self):
        config = TilingConfig.square(8)
        changed = config.with_changes(margin=4, columns=3)
        assert changed.margin == 4
        assert changed.columns == 3
        assert config.margin == 0

    def test_with_changes_when_invalid_then_raises(self):
        with pytest.raises(InvalidConfigError):
            TilingConfig().with_changes(spacing=-1)

    def test_frozen_when_assigning_then_raises(self):
        config = TilingConfig()
        with pytest.raises(AttributeError):
            config.margin = 3


class TestPixelValueValidation:

    @pytest.mark.parametrize("value", [0, 1, 65535])
    def test_validate_pixel_value_when_in_range_then_returns_value(self, value):
        assert validate_pixel_value(value) == value

    @pytest.mark.parametrize("value", [-1, 65536])
    def test_validate_pixel_value_when_out_of_range_then_raises(self, value):
        with pytest.raises(InvalidConfigError, match=r"\[0, 65535\]"):
            validate_pixel_value(value, "thickness")

    def test_validate_positive_pixel_value_when_zero_then_raises(self):
        with pytest.raises(InvalidConfigError, match=r"\[1, 65535\]"):
            validate_positive_pixel_value(0)

    def test_validate_pixel_value_names_field(self):
        with pytest.raises(InvalidConfigError, match="thickness"):
            validate_pixel_value(-5, "thickness")
