"""
ASCII Glyph Renderer - Converter
================================
End-to-end conversion: load, resample, render.
"""

import logging
from typing import Any, Optional

from PIL import Image

from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.glyphs import GlyphGrid
from ascii_glyph_renderer.loader import ImageSource, buffer_from_image, open_image
from ascii_glyph_renderer.pipeline import RenderPipeline

logger = logging.getLogger(__name__)


class AsciiArtGenerator:
    """Convert images to glyph grids with one fixed configuration."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or RenderConfig()

    def convert(self, image: Image.Image) -> GlyphGrid:
        """
        Resample a PIL image to ``config.width`` cells and render it.

        Args:
            image: PIL Image to convert

        Returns:
            GlyphGrid, colored if ``config.color_mode`` is set
        """
        buffer = buffer_from_image(image, self.config.width)
        logger.debug("resampled %s to %dx%d", image.size, buffer.width, buffer.height)
        return RenderPipeline.render(buffer, buffer.width, buffer.height, self.config)

    def convert_source(self, source: ImageSource) -> GlyphGrid:
        """Load an image from a path or URL and convert it."""
        return self.convert(open_image(source))


def image_to_glyphs(image: Image.Image, **options: Any) -> GlyphGrid:
    """
    Convenience function to convert an image to glyphs.

    Args:
        image: PIL Image
        **options: Config options, either field names (``width``,
            ``contrast``...) or option names (``charSet``, ``ditherAmount``...)

    Returns:
        GlyphGrid
    """
    config = RenderConfig.from_options(options)
    return AsciiArtGenerator(config).convert(image)


def convert_url(source: ImageSource, config: Optional[RenderConfig] = None) -> GlyphGrid:
    """Load from a path, ``file://`` or ``http(s)://`` URL and convert."""
    return AsciiArtGenerator(config).convert_source(source)
