"""Run the tiletool command line with ``python -m tile_toolkit``."""

from tile_toolkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
