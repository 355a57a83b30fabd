"""Core value types for tile_toolkit."""
