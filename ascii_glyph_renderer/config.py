"""
ASCII Glyph Renderer - Configuration
====================================
Immutable, validated settings for one conversion.
"""

from dataclasses import dataclass, fields, replace as _replace
import math
from typing import Any, Dict, Mapping

from ascii_glyph_renderer.constants import CharacterSet
from ascii_glyph_renderer.errors import ConfigurationError


# Accepted value domains (inclusive unless noted)
CONTRAST_RANGE = (0.0, 4.0)                  # lower bound exclusive
BRIGHTNESS_RANGE = (-1.0, 1.0)
DITHER_RANGE = (0.0, 1.0)

# Option-bag names mapped onto dataclass fields
OPTION_ALIASES = {
    'width': 'width',
    'charSet': 'charset',
    'useDetailedCharSet': 'use_detailed_palette',
    'invertBrightness': 'invert',
    'colorMode': 'color_mode',
    'contrastFactor': 'contrast',
    'brightnessFactor': 'brightness',
    'applySharpening': 'sharpening',
    'applyDithering': 'dithering',
    'ditherAmount': 'dither_strength',
}


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for one pixel-to-glyph conversion."""

    # Size
    width: int = 100                         # Target width in cells

    # Palette
    charset: str = CharacterSet.STANDARD     # Dense to sparse
    use_detailed_palette: bool = False       # Use the 70-glyph palette instead
    invert: bool = False                     # Invert brightness mapping

    # Tone
    contrast: float = 1.0                    # Multiplier around mid-gray (0.5-2.0 typical)
    brightness: float = 0.0                  # Fraction of full scale added (-0.5-0.5 typical)

    # Output
    color_mode: bool = False                 # Attach RGB to each glyph

    # Filters
    sharpening: bool = False                 # Unsharp mask before mapping
    dithering: bool = False                  # Floyd-Steinberg to 8 gray levels
    dither_strength: float = 0.5             # Fraction of error diffused (0-1)

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigurationError(f"width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise ConfigurationError(f"width must be positive, got {self.width}")

        if not isinstance(self.charset, str) or len(self.charset) == 0:
            raise ConfigurationError("character palette must not be empty")

        _check_range('contrast', self.contrast, CONTRAST_RANGE, low_inclusive=False)
        _check_range('brightness', self.brightness, BRIGHTNESS_RANGE)
        _check_range('dither_strength', self.dither_strength, DITHER_RANGE)

    @property
    def active_palette(self) -> str:
        """Palette used for glyph selection."""
        return CharacterSet.DETAILED if self.use_detailed_palette else self.charset

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'RenderConfig':
        """
        Build a config from an option bag.

        Accepts both the camelCase option names (``charSet``,
        ``ditherAmount``, ...) and the field names themselves. Options that
        are absent keep their defaults.

        Raises:
            ConfigurationError: On unknown option names or invalid values
        """
        field_names = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in field_names:
                raise ConfigurationError(f"Unknown option: {key!r}")
            if name in kwargs:
                raise ConfigurationError(f"Option given twice: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **changes) -> 'RenderConfig':
        """Return a new, validated config with ``changes`` applied."""
        try:
            return _replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from None


def _check_range(name: str, value: Any, bounds, low_inclusive: bool = True) -> None:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    too_low = value < low if low_inclusive else value <= low
    if too_low or value > high:
        opener = '[' if low_inclusive else '('
        raise ConfigurationError(f"{name} must be in {opener}{low}, {high}], got {value}")
