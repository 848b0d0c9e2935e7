"""Image loading, saving and conversion for PPM, BMP and JPEG files."""

__version__ = "0.1.0"