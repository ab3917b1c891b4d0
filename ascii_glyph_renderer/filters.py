"""
ASCII Glyph Renderer - Convolution Filters
==========================================
3x3 kernel convolution and the unsharp mask built on it.

Only interior pixels are convolved. Pixels in the first and last row and
column are copied through from the input unchanged, as is every alpha
value.
"""

import logging
from typing import Sequence

import numpy as np

from ascii_glyph_renderer.buffer import PixelBuffer
from ascii_glyph_renderer.constants import (
    GAUSSIAN_KERNEL,
    GAUSSIAN_NORMALIZER,
    SHARPEN_AMOUNT,
)

logger = logging.getLogger(__name__)


def _to_uint8(arr: np.ndarray) -> np.ndarray:
    """Round half-to-even and clamp to 0-255."""
    return np.clip(np.rint(arr), 0, 255).astype(np.uint8)


class Convolver:
    """Generic 3x3 convolution over the RGB channels of a buffer."""

    @staticmethod
    def convolve(buffer: PixelBuffer, width: int, height: int,
                 kernel: Sequence[Sequence[float]], normalizer: float) -> PixelBuffer:
        """
        Convolve the interior of ``buffer`` with a 3x3 kernel.

        Args:
            buffer: Source pixels (not modified)
            width: Buffer width
            height: Buffer height
            kernel: 3x3 weights, indexed ``kernel[dy + 1][dx + 1]``
            normalizer: Divisor applied to each weighted sum

        Returns:
            New PixelBuffer of the same size
        """
        kernel = np.asarray(kernel, dtype=np.float64)
        if kernel.shape != (3, 3):
            raise ValueError(f"kernel must be 3x3, got shape {kernel.shape}")
        if normalizer == 0:
            raise ValueError("normalizer must be non-zero")

        buffer.ensure_size(width, height)
        src = buffer.array
        out = buffer.copy_array()
        if width < 3 or height < 3:
            return PixelBuffer(out, width, height)

        rgb = src[..., :3].astype(np.float64)
        acc = np.zeros((height - 2, width - 2, 3), dtype=np.float64)
        for ky in range(3):
            for kx in range(3):
                weight = kernel[ky, kx]
                if weight:
                    acc += rgb[ky:ky + height - 2, kx:kx + width - 2] * weight

        out[1:-1, 1:-1, :3] = _to_uint8(acc / normalizer)
        return PixelBuffer(out, width, height)

    @classmethod
    def gaussian_blur(cls, buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
        """Blur with the fixed 1-2-1 Gaussian kernel."""
        return cls.convolve(buffer, width, height, GAUSSIAN_KERNEL, GAUSSIAN_NORMALIZER)


class Sharpener:
    """Unsharp mask with a fixed strength."""

    AMOUNT = SHARPEN_AMOUNT

    @classmethod
    def sharpen(cls, buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
        """original + (original - blurred) * 0.8, per RGB channel."""
        blurred = Convolver.gaussian_blur(buffer, width, height)

        original = buffer.array[..., :3].astype(np.float64)
        diff = original - blurred.array[..., :3].astype(np.float64)

        out = buffer.copy_array()
        out[..., :3] = _to_uint8(original + diff * cls.AMOUNT)
        logger.debug("sharpened %dx%d buffer", width, height)
        return PixelBuffer(out, width, height)
