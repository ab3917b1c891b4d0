"""
ASCII Glyph Renderer - Constants
================================
Character palettes and fixed filter parameters.

Palettes are ordered densest glyph first: without inversion a bright
pixel maps to index 0.
"""

from dataclasses import dataclass
from typing import Dict

from ascii_glyph_renderer.errors import ConfigurationError


# =============================================================================
# CHARACTER SETS
# =============================================================================

@dataclass(frozen=True)
class CharacterSet:
    """Predefined character palettes for luminance mapping."""

    # Dense to sparse
    STANDARD: str = "@%#*+=-:. "
    DETAILED: str = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
    BLOCKS: str = "█▓▒░ "
    SIMPLE: str = "@Oo. "
    BINARY: str = "█ "

    @classmethod
    def presets(cls) -> Dict[str, str]:
        """Mapping of preset name to palette."""
        return {
            'standard': cls.STANDARD,
            'detailed': cls.DETAILED,
            'blocks': cls.BLOCKS,
            'simple': cls.SIMPLE,
            'binary': cls.BINARY,
        }

    @classmethod
    def get_preset(cls, name: str) -> str:
        """Get character set by name."""
        presets = cls.presets()
        try:
            return presets[name.lower()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown character set: {name!r} (choose from {', '.join(presets)})"
            ) from None


BLANK_GLYPH = ' '

# =============================================================================
# FILTER PARAMETERS
# =============================================================================

GAUSSIAN_KERNEL = (
    (1, 2, 1),
    (2, 4, 2),
    (1, 2, 1),
)
GAUSSIAN_NORMALIZER = 16

SHARPEN_AMOUNT = 0.8                         # Unsharp mask strength

DITHER_STEP = 32                             # 8 gray levels
FLOYD_STEINBERG_WEIGHTS = (
    # (dx, dy, weight)
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)

# Luminance weights (ITU-R BT.601)
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

# Glyph cells are about twice as tall as they are wide
CHAR_ASPECT_RATIO = 0.5
