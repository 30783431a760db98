"""Draw QR code module grids as half-block text, compressed PNG files and shaped raster blocks."""

__version__ = "2.2.5"