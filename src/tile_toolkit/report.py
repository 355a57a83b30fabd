"""
Module: report

Purpose:
    Render frequency-ranked tile records as a plain-text table.

Key Functions:
    - frequency_rows(): Table rows for a record sequence
    - format_frequency_table(): Aligned text table

Used By:
    - cli: parse --verbose
"""

from __future__ import annotations

from typing import List, Sequence

from tile_toolkit.core.models import TileRecord

BASE_HEADERS = ["Tileset Index", "Count", "First Location"]
TRANSFORM_HEADER = "Transformation Required"


def frequency_rows(
    records: Sequence[TileRecord],
    include_transform: bool = False,
) -> List[List[str]]:
    """One row of cell strings per record, in record order."""
    rows = []
    for index, record in enumerate(records):
        row = [str(index), str(record.count), str(record.first_location)]
        if include_transform:
            row.append(str(record.required_transform).lower())
        rows.append(row)
    return rows


def format_frequency_table(
    records: Sequence[TileRecord],
    include_transform: bool = False,
) -> str:
    """
    Format records as a boxed text table.

    Example:
        >>> print(format_frequency_table(records))
        +---------------+-------+----------------+
        | TILESET INDEX | COUNT | FIRST LOCATION |
        +---------------+-------+----------------+
        | 0             | 2     | (0,0)          |
        +---------------+-------+----------------+
    """
    headers = list(BASE_HEADERS)
    if include_transform:
        headers.append(TRANSFORM_HEADER)
    rows = frequency_rows(records, include_transform)

    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    out = [rule, line([h.upper() for h in headers]), rule]
    out.extend(line(row) for row in rows)
    if rows:
        out.append(rule)
    return "\n".join(out)
