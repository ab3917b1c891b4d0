"""
ASCII Glyph Renderer - Glyphs
=============================
Output data types and luminance-to-character mapping.
"""

from dataclasses import dataclass
import math
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ascii_glyph_renderer.constants import BLANK_GLYPH
from ascii_glyph_renderer.errors import ConfigurationError


RGB = Tuple[int, int, int]


# =============================================================================
# OUTPUT TYPES
# =============================================================================

@dataclass(frozen=True)
class Glyph:
    """One output cell: a character and, in color mode, its RGB."""
    char: str
    color: Optional[RGB] = None

    @property
    def is_blank(self) -> bool:
        return self.char == BLANK_GLYPH and self.color is None

    @property
    def hex_color(self) -> Optional[str]:
        if self.color is None:
            return None
        r, g, b = self.color
        return f"#{r:02X}{g:02X}{b:02X}"


BLANK = Glyph(BLANK_GLYPH)


class GlyphGrid:
    """Rows of glyphs produced by one render call."""

    def __init__(self, rows: Sequence[Sequence[Glyph]]):
        self._rows: Tuple[Tuple[Glyph, ...], ...] = tuple(tuple(row) for row in rows)

    @property
    def rows(self) -> Tuple[Tuple[Glyph, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def has_color(self) -> bool:
        return any(glyph.color is not None for row in self._rows for glyph in row)

    @property
    def lines(self) -> List[str]:
        """Characters of each row joined into a string."""
        return [''.join(glyph.char for glyph in row) for row in self._rows]

    @property
    def colors(self) -> List[List[Optional[RGB]]]:
        return [[glyph.color for glyph in row] for row in self._rows]

    def to_text(self) -> str:
        """Plain text: every row terminated by a newline."""
        return ''.join(line + '\n' for line in self.lines)

    def __getitem__(self, index: int) -> Tuple[Glyph, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterator[Tuple[Glyph, ...]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GlyphGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"GlyphGrid({self.width}x{self.height})"


# =============================================================================
# GLYPH MAPPING
# =============================================================================

class GlyphMapper:
    """Map adjusted luminance to a palette character."""

    @staticmethod
    def index_for(luminance: float, palette_length: int, invert: bool) -> int:
        """Palette index for ``luminance``, clamped to ``[0, palette_length - 1]``."""
        if palette_length <= 0:
            raise ConfigurationError("character palette must not be empty")
        if invert:
            idx = math.floor(luminance / 256 * palette_length)
        else:
            idx = math.floor((255 - luminance) / 256 * palette_length)
        return max(0, min(idx, palette_length - 1))

    @classmethod
    def char_for(cls, luminance: float, palette: str, invert: bool) -> str:
        """
        Character representing ``luminance``.

        Without inversion bright values land on the start of the palette;
        with inversion they land on the end.
        """
        return palette[cls.index_for(luminance, len(palette), invert)]

    @staticmethod
    def index_array(luminance: np.ndarray, palette_length: int, invert: bool) -> np.ndarray:
        """Array form of :meth:`index_for`."""
        if palette_length <= 0:
            raise ConfigurationError("character palette must not be empty")
        values = luminance.astype(np.float64)
        if not invert:
            values = 255 - values
        idx = np.floor(values / 256 * palette_length).astype(np.int64)
        return np.clip(idx, 0, palette_length - 1)
