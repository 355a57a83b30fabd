"""
Module: cli

Purpose:
    Command line interface for tilesets.

    tiletool parse <file>     Find the unique tiles of an image
    tiletool respace <file>   Rewrite a tileset with new margin/spacing
    tiletool extrude <file>   Extrude the tiles of a tileset
    tiletool version          Print the version

Key Functions:
    - main(): Entry point, returns the process exit status
    - build_parser(): argparse parser for all subcommands

Dependencies:
    - argparse, logging (std)
    - tile_toolkit.dedup, extrude, images, layout, report

Used By:
    - ``tiletool`` console script and ``python -m tile_toolkit``
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from tile_toolkit import __version__
from tile_toolkit.core.models import InvalidConfigError, TilingConfig, validate_pixel_value
from tile_toolkit.dedup import deduplicate
from tile_toolkit.extrude import extrude_tileset
from tile_toolkit.images import (
    SEARCH_ORDER,
    VALID_OUTPUT_EXTENSIONS_MESSAGE,
    RasterIOError,
    Transform,
    color_from_hex,
    open_raster,
    read_tileset,
    save_raster,
    transform_by_name,
)
from tile_toolkit.layout import EmptyTileSetError, GeometryMismatchError, pack_tiles
from tile_toolkit.report import format_frequency_table

logger = logging.getLogger("tiletool")

DEFAULT_OUTPUT = "tileset.png"
DEFAULT_COLOR = "#00000000"


def _common_options() -> argparse.ArgumentParser:
    """Options shared by every tileset command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    common.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT,
        help=f"file name and format to output to. {VALID_OUTPUT_EXTENSIONS_MESSAGE}",
    )
    common.add_argument("-s", "--size", type=int, default=16, help="tile size in pixels. Tiles are square")
    common.add_argument("-m", "--margin", type=int, default=0, help="the tileset margin (default 0)")
    common.add_argument("-p", "--spacing", type=int, default=0, help="the tile spacing (default 0)")
    common.add_argument(
        "-c", "--color", default=DEFAULT_COLOR,
        help="the 8 digit hex tileset background color to write (default #00000000, transparent black)",
    )
    common.add_argument("--columns", type=int, default=10, help="output tileset width in tiles (default 10)")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiletool",
        description="Command line interface utility for tilesets",
    )
    sub = parser.add_subparsers(dest="command")
    common = _common_options()

    parse = sub.add_parser(
        "parse", parents=[common],
        help="Parse a tileset from an image.",
        description=(
            "Process an image and identify the set of unique tiles that compose it, "
            "which are then output as a tileset. Verbose output lists a frequency count "
            "for all tiles, their first location in the image and whether it was "
            "necessary to transform them by flipping or rotation."
        ),
    )
    parse.add_argument("filename")
    parse.add_argument("-x", "--x-offset", type=int, default=0, help="start at this x coordinate (default 0)")
    parse.add_argument("-y", "--y-offset", type=int, default=0, help="start at this y coordinate (default 0)")
    parse.add_argument(
        "-t", "--transform", action="store_true",
        help="allow tiles to be flipped and rotated (default false)",
    )
    parse.add_argument(
        "--transforms", default=None,
        help="comma separated transforms to try, e.g. flipH-none,none-rotate90 (implies --transform)",
    )

    respace = sub.add_parser(
        "respace", parents=[common],
        help="Respace a tileset.",
        description="Output the tileset with the specified margin and spacing.",
    )
    respace.add_argument("filename")
    respace.add_argument("--out-margin", type=int, default=0, help="the output tileset margin (default 0)")
    respace.add_argument("--out-spacing", type=int, default=0, help="the output tile spacing (default 0)")

    extrude = sub.add_parser(
        "extrude", parents=[common],
        help="Extrude the tiles of a tileset.",
        description=(
            "Copy tile content into the margin around, and spacing between, tiles. "
            "Extrusion mitigates texture bleeding or tearing during tileset map scrolling. "
            "The tileset margin grows by the extrusion thickness and the spacing by "
            "twice the extrusion thickness."
        ),
    )
    extrude.add_argument("filename")
    extrude.add_argument("--thickness", type=int, default=1, help="extrusion thickness in pixels (default 1)")

    sub.add_parser("version", help="Print the version of tiletool")
    return parser


def _config_from_args(args: argparse.Namespace) -> TilingConfig:
    return TilingConfig.square(
        args.size,
        margin=args.margin,
        spacing=args.spacing,
        columns=args.columns,
        background=color_from_hex(args.color),
    )


def _parse_transforms(value: Optional[str]) -> Sequence[Transform]:
    if not value:
        return SEARCH_ORDER
    names = [name.strip() for name in value.split(",") if name.strip()]
    try:
        transforms = [transform_by_name(name) for name in names]
    except KeyError as e:
        valid = ", ".join(t.name for t in SEARCH_ORDER)
        raise InvalidConfigError(f"{e.args[0]}. Valid transforms are: {valid}") from e
    return [t for t in transforms if not t.is_identity]


def run_parse(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    validate_pixel_value(args.x_offset, "x offset")
    validate_pixel_value(args.y_offset, "y offset")
    transform = args.transform or bool(args.transforms)
    transforms = _parse_transforms(args.transforms)

    image = open_raster(args.filename)
    result = deduplicate(
        image,
        config,
        transform=transform,
        transforms=transforms,
        x_offset=args.x_offset,
        y_offset=args.y_offset,
    )
    if args.verbose:
        print(format_frequency_table(result.records, include_transform=transform))

    tileset = pack_tiles(result.images(), config)
    save_raster(tileset, args.output)
    return 0


def run_respace(args: argparse.Namespace) -> int:
    read_config = _config_from_args(args)
    image = open_raster(args.filename)
    tiles, columns = read_tileset(image, read_config)

    write_config = read_config.with_changes(
        margin=args.out_margin,
        spacing=args.out_spacing,
        columns=columns,
    )
    logger.info(f"Margin: reading: {read_config.margin} writing: {write_config.margin}")
    logger.info(f"Spacing: reading: {read_config.spacing} writing: {write_config.spacing}")
    logger.info(f"Background Color: writing: {args.color}")

    save_raster(pack_tiles(tiles, write_config), args.output)
    return 0


def run_extrude(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    image = open_raster(args.filename)
    result = extrude_tileset(image, config, args.thickness)

    print(f"Extruded tileset has margin: {result.margin} and spacing: {result.spacing}")
    save_raster(result.image, args.output)
    return 0


_COMMANDS = {
    "parse": run_parse,
    "respace": run_respace,
    "extrude": run_extrude,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "version":
        print(f"tiletool version {__version__}")
        return 0

    level = logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger("tile_toolkit").setLevel(level)
    logger.setLevel(level)
    logger.info(f"Outputting to {args.output}")

    try:
        return _COMMANDS[args.command](args)
    except (InvalidConfigError, GeometryMismatchError, EmptyTileSetError, RasterIOError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
