"""
ASCII Glyph Renderer - Tone Mapping
===================================
Perceptual luminance and contrast/brightness adjustment.
"""

import math

import numpy as np

from ascii_glyph_renderer.constants import LUMA_B, LUMA_G, LUMA_R


class ToneMapper:
    """Pure per-pixel tone functions, scalar and array forms."""

    @staticmethod
    def luminance(r: float, g: float, b: float) -> int:
        """
        Perceived brightness of an RGB sample.

        Green weighs most and blue least. The weighted sum is rounded
        half-up and clamped to 0-255.
        """
        value = math.floor(LUMA_R * r + LUMA_G * g + LUMA_B * b + 0.5)
        return max(0, min(255, value))

    @staticmethod
    def adjust(value: float, contrast: float, brightness: float) -> float:
        """
        Apply contrast around mid-gray (128), then add ``brightness``
        as a fraction of full scale. The result is clamped but not rounded.
        """
        adjusted = (value - 128) * contrast + 128
        adjusted += brightness * 255
        return max(0.0, min(255.0, adjusted))

    @staticmethod
    def luminance_array(rgb: np.ndarray) -> np.ndarray:
        """Array form of :meth:`luminance` over an ``(..., 3)`` array."""
        rgb = rgb.astype(np.float64)
        value = np.floor(LUMA_R * rgb[..., 0] + LUMA_G * rgb[..., 1] + LUMA_B * rgb[..., 2] + 0.5)
        return np.clip(value, 0, 255)

    @staticmethod
    def adjust_array(values: np.ndarray, contrast: float, brightness: float) -> np.ndarray:
        """Array form of :meth:`adjust`."""
        adjusted = (values.astype(np.float64) - 128) * contrast + 128
        adjusted += brightness * 255
        return np.clip(adjusted, 0.0, 255.0)
