"""isohotel - isometric room simulation core."""

__version__ = "0.1.0"
