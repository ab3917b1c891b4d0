"""
ASCII Glyph Renderer - Render Pipeline
======================================
Orchestrates the filters and mappers over one sampled pixel buffer:

    buffer -> [sharpen] -> [dither] -> luminance -> adjust -> glyph

Inputs are validated before any pixel is touched; a call either returns a
complete GlyphGrid or raises.
"""

import logging
from typing import Iterable, Union

import numpy as np

from ascii_glyph_renderer.buffer import PixelBuffer
from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.dithering import Ditherer
from ascii_glyph_renderer.errors import ConfigurationError
from ascii_glyph_renderer.filters import Sharpener
from ascii_glyph_renderer.glyphs import BLANK, Glyph, GlyphGrid, GlyphMapper
from ascii_glyph_renderer.tone import ToneMapper

logger = logging.getLogger(__name__)

BufferLike = Union[PixelBuffer, bytes, bytearray, np.ndarray, Iterable[int]]


class RenderPipeline:
    """Turns an RGBA buffer into a GlyphGrid."""

    @staticmethod
    def prepare(buffer: BufferLike, width: int, height: int) -> PixelBuffer:
        """Coerce ``buffer`` to a PixelBuffer of exactly ``width`` x ``height``."""
        if isinstance(buffer, PixelBuffer):
            buffer.ensure_size(width, height)
            return buffer
        return PixelBuffer(buffer, width, height)

    @classmethod
    def filter(cls, buffer: PixelBuffer, config: RenderConfig) -> PixelBuffer:
        """Run the enabled filters in their fixed order: sharpen, then dither."""
        width, height = buffer.size
        if config.sharpening:
            buffer = Sharpener.sharpen(buffer, width, height)
        if config.dithering:
            buffer = Ditherer.dither(buffer, width, height, config.dither_strength)
        return buffer

    @classmethod
    def render(cls, buffer: BufferLike, width: int, height: int,
               config: RenderConfig) -> GlyphGrid:
        """
        Render a sampled buffer to glyphs.

        Args:
            buffer: RGBA samples, already resampled to ``width`` x ``height``
            width: Buffer width in pixels (one glyph per pixel)
            height: Buffer height in pixels
            config: Conversion settings

        Returns:
            GlyphGrid of ``height`` rows by ``width`` glyphs

        Raises:
            ConfigurationError: If ``config`` is not a RenderConfig
            DimensionMismatch: If the buffer size does not match
        """
        if not isinstance(config, RenderConfig):
            raise ConfigurationError(f"expected RenderConfig, got {type(config).__name__}")
        pixels = cls.prepare(buffer, width, height)
        palette = config.active_palette

        logger.debug(
            "rendering %dx%d (sharpen=%s, dither=%s, color=%s, palette=%d glyphs)",
            width, height, config.sharpening, config.dithering,
            config.color_mode, len(palette),
        )

        pixels = cls.filter(pixels, config)
        arr = pixels.array

        luminance = ToneMapper.luminance_array(arr[..., :3])
        adjusted = ToneMapper.adjust_array(luminance, config.contrast, config.brightness)
        indices = GlyphMapper.index_array(adjusted, len(palette), config.invert)
        opaque = arr[..., 3] != 0

        rows = []
        for y in range(height):
            row = []
            for x in range(width):
                if not opaque[y, x]:
                    row.append(BLANK)
                    continue
                char = palette[indices[y, x]]
                if config.color_mode:
                    r, g, b = (int(v) for v in arr[y, x, :3])
                    row.append(Glyph(char, (r, g, b)))
                else:
                    row.append(Glyph(char))
            rows.append(row)

        return GlyphGrid(rows)


def render(buffer: BufferLike, width: int, height: int, config: RenderConfig) -> GlyphGrid:
    """Module-level shortcut for :meth:`RenderPipeline.render`."""
    return RenderPipeline.render(buffer, width, height, config)
