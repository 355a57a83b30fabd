"""Top-level package for tiletool.

Provides subpackages:
- tile_toolkit.layout – grid geometry and tileset packing
- tile_toolkit.images – raster I/O, cropping and symmetry transforms
- tile_toolkit.dedup – tile deduplication and frequency ranking
- tile_toolkit.extrude – tile border extrusion
- tile_toolkit.cli – the ``tiletool`` command line
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path


def _get_version() -> str:
    """Installed distribution version, or the pyproject.toml one in a checkout."""
    try:
        return _pkg_version("tile_toolkit")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            key, _, value = line.partition("=")
            if key.strip() == "version":
                return value.strip().strip("\"'")
    return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
