"""
ASCII Glyph Renderer - Dithering
================================
Floyd-Steinberg error diffusion to an 8-level grayscale.

Pixels are visited strictly in raster order (rows top to bottom, columns
left to right). Each pixel's quantization depends on error pushed into it
by earlier pixels, so the loop cannot be reordered or parallelized.
"""

import logging
import math

import numpy as np

from ascii_glyph_renderer.buffer import PixelBuffer
from ascii_glyph_renderer.constants import DITHER_STEP, FLOYD_STEINBERG_WEIGHTS

logger = logging.getLogger(__name__)


def quantize_gray(r: int, g: int, b: int) -> int:
    """Nearest multiple of 32 to the channel mean (may be 256 for near-white)."""
    return math.floor((r + g + b) / 3 / DITHER_STEP + 0.5) * DITHER_STEP


class Ditherer:
    """Floyd-Steinberg ditherer over RGBA buffers."""

    @staticmethod
    def dither(buffer: PixelBuffer, width: int, height: int, strength: float) -> PixelBuffer:
        """
        Quantize opaque pixels to gray and diffuse the residual error.

        Args:
            buffer: Source pixels (not modified)
            width: Buffer width
            height: Buffer height
            strength: Fraction of the residual error diffused (0-1)

        Returns:
            New PixelBuffer with quantized RGB; alpha unchanged

        Transparent pixels are neither quantized nor written by diffusion.
        """
        buffer.ensure_size(width, height)
        data = buffer.copy_array().astype(np.int32)

        for y in range(height):
            for x in range(width):
                if data[y, x, 3] == 0:
                    continue

                old_r, old_g, old_b = (int(v) for v in data[y, x, :3])
                gray = quantize_gray(old_r, old_g, old_b)
                data[y, x, :3] = min(gray, 255)

                err_r = (old_r - gray) * strength
                err_g = (old_g - gray) * strength
                err_b = (old_b - gray) * strength
                if not (err_r or err_g or err_b):
                    continue

                for dx, dy, weight in FLOYD_STEINBERG_WEIGHTS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and ny < height and data[ny, nx, 3] != 0:
                        _add_error(data, nx, ny, err_r * weight, err_g * weight, err_b * weight)

        logger.debug("dithered %dx%d buffer (strength=%.2f)", width, height, strength)
        return PixelBuffer(data.astype(np.uint8), width, height)


def _add_error(data: np.ndarray, x: int, y: int, dr: float, dg: float, db: float) -> None:
    # Stored values are clamped, then rounded half-to-even like an 8-bit clamped array
    for channel, delta in ((0, dr), (1, dg), (2, db)):
        value = data[y, x, channel] + delta
        data[y, x, channel] = round(max(0.0, min(255.0, float(value))))
