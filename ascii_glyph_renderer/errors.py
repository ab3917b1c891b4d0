"""
ASCII Glyph Renderer - Errors
=============================
Exception types raised by the rendering pipeline and its adapters.

Every error is raised before any pixel is processed, so a failing call
never returns a partial glyph grid.
"""


class RenderError(ValueError):
    """Base class for all errors raised by this package."""


class ConfigurationError(RenderError):
    """Invalid render configuration (empty palette, bad width, out-of-range factors)."""


class DimensionMismatch(RenderError):
    """Pixel buffer size does not match ``width * height * 4``."""

    def __init__(self, expected: int, actual: int, width: int, height: int):
        self.expected = expected
        self.actual = actual
        self.width = width
        self.height = height
        super().__init__(
            f"buffer holds {actual} values, expected {expected} "
            f"for a {width}x{height} RGBA image"
        )


class ImageLoadError(RenderError):
    """An image could not be fetched or decoded."""
