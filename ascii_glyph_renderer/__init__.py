"""
ASCII Glyph Renderer
====================
Render raster images as grids of text glyphs, optionally with per-glyph
color, for monospaced display.

Example:
    from PIL import Image
    from ascii_glyph_renderer import RenderConfig, AsciiArtGenerator

    config = RenderConfig(width=80, sharpening=True)
    grid = AsciiArtGenerator(config).convert(Image.open("cat.png"))
    print(grid.to_text(), end="")

Lower level, over an already-resampled RGBA buffer:

    from ascii_glyph_renderer import RenderPipeline
    grid = RenderPipeline.render(rgba_bytes, width, height, RenderConfig())

For debug logging, enable with:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - silent unless the application configures logging
logger = logging.getLogger("ascii_glyph_renderer")
logger.addHandler(logging.NullHandler())

from ascii_glyph_renderer.buffer import PixelBuffer
from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.constants import CharacterSet
from ascii_glyph_renderer.converter import AsciiArtGenerator, convert_url, image_to_glyphs
from ascii_glyph_renderer.dithering import Ditherer
from ascii_glyph_renderer.errors import (
    ConfigurationError,
    DimensionMismatch,
    ImageLoadError,
    RenderError,
)
from ascii_glyph_renderer.filters import Convolver, Sharpener
from ascii_glyph_renderer.formatters import AnsiColorFormatter, HtmlFormatter, PlainTextFormatter
from ascii_glyph_renderer.glyphs import Glyph, GlyphGrid, GlyphMapper
from ascii_glyph_renderer.loader import buffer_from_image, load_buffer, open_image, target_size
from ascii_glyph_renderer.pipeline import RenderPipeline, render
from ascii_glyph_renderer.tone import ToneMapper

__version__ = "0.1.0"

__all__ = [
    # Data
    'PixelBuffer',
    'RenderConfig',
    'Glyph',
    'GlyphGrid',
    'CharacterSet',

    # Pipeline
    'ToneMapper',
    'Convolver',
    'Sharpener',
    'Ditherer',
    'GlyphMapper',
    'RenderPipeline',
    'render',

    # Errors
    'RenderError',
    'ConfigurationError',
    'DimensionMismatch',
    'ImageLoadError',

    # Adapters
    'AsciiArtGenerator',
    'image_to_glyphs',
    'convert_url',
    'open_image',
    'target_size',
    'buffer_from_image',
    'load_buffer',
    'PlainTextFormatter',
    'AnsiColorFormatter',
    'HtmlFormatter',
]
