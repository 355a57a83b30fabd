"""
Module: images.color

Purpose:
    Convert between 8-digit hex color strings (#rrggbbaa) and RGBA tuples.

Key Functions:
    - color_from_hex(): Parse "#rrggbbaa"
    - hex_from_color(): Format an RGBA tuple

Used By:
    - cli: --color flag
"""

from __future__ import annotations

import re
from typing import Tuple

from tile_toolkit.core.models import InvalidConfigError

HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def color_from_hex(value: str) -> Tuple[int, int, int, int]:
    """
    Parse an 8-digit hex color.

    Example:
        >>> color_from_hex("#ff000080")
        (255, 0, 0, 128)

    Raises:
        InvalidConfigError: If value is not of the form #rrggbbaa
    """
    m = HEX_COLOR_RE.match(value.strip())
    if not m:
        raise InvalidConfigError(f"expected an 8 digit hex color like #00000000: {value!r}")
    r, g, b, a = (int(part, 16) for part in m.groups())
    return r, g, b, a


def hex_from_color(color: Tuple[int, int, int, int]) -> str:
    """Format an RGBA tuple as #rrggbbaa."""
    return "#" + "".join(f"{c:02x}" for c in color)
