"""Per-pixel raster image effects on NumPy arrays, with Pillow file I/O and a command line."""

__version__ = "0.1.0"

__all__ = ["channels", "cli", "geometry", "masks", "patterns", "pixels", "warp"]