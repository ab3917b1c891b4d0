import unittest

import numpy as np

from ascii_glyph_renderer.constants import CharacterSet
from ascii_glyph_renderer.errors import ConfigurationError
from ascii_glyph_renderer.glyphs import Glyph, GlyphGrid, GlyphMapper


class GlyphMapperTests(unittest.TestCase):
    def test_two_glyph_palette(self):
        self.assertEqual(GlyphMapper.char_for(255, "@ ", False), "@")
        self.assertEqual(GlyphMapper.char_for(0, "@ ", False), " ")

    def test_invert_swaps(self):
        self.assertEqual(GlyphMapper.char_for(255, "@ ", True), " ")
        self.assertEqual(GlyphMapper.char_for(0, "@ ", True), "@")

    def test_standard_palette_midpoint(self):
        self.assertEqual(GlyphMapper.char_for(128, CharacterSet.STANDARD, False), "+")

    def test_within_bounds(self):
        for n in (1, 2, 10, 70):
            for lum in (0, 0.4, 127.5, 254.9, 255):
                for invert in (False, True):
                    idx = GlyphMapper.index_for(lum, n, invert)
                    self.assertTrue(0 <= idx < n)

    def test_monotonic(self):
        palette = CharacterSet.DETAILED
        previous = None
        for lum in range(256):
            idx = GlyphMapper.index_for(lum, len(palette), False)
            if previous is not None:
                self.assertLessEqual(idx, previous)
            previous = idx

        previous = None
        for lum in range(256):
            idx = GlyphMapper.index_for(lum, len(palette), True)
            if previous is not None:
                self.assertGreaterEqual(idx, previous)
            previous = idx

    def test_empty_palette(self):
        with self.assertRaises(ConfigurationError):
            GlyphMapper.char_for(100, "", False)
        with self.assertRaises(ConfigurationError):
            GlyphMapper.index_array(np.zeros((1, 1)), 0, False)

    def test_array_form_matches_scalar(self):
        lum = np.array([0, 0.5, 25.6, 127.5, 128, 200.25, 255])
        for invert in (False, True):
            expected = [GlyphMapper.index_for(v, 10, invert) for v in lum]
            self.assertEqual(GlyphMapper.index_array(lum, 10, invert).tolist(), expected)


class GlyphGridTests(unittest.TestCase):
    def test_text_rows_are_newline_terminated(self):
        grid = GlyphGrid([[Glyph("a"), Glyph("b")], [Glyph("c"), Glyph(" ")]])
        self.assertEqual(grid.to_text(), "ab\nc \n")
        self.assertEqual((grid.width, grid.height), (2, 2))
        self.assertFalse(grid.has_color)

    def test_colors(self):
        grid = GlyphGrid([[Glyph("a", (255, 0, 16))]])
        self.assertTrue(grid.has_color)
        self.assertEqual(grid.colors, [[(255, 0, 16)]])
        self.assertEqual(grid[0][0].hex_color, "#FF0010")


if __name__ == "__main__":
    unittest.main()
