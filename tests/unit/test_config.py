import dataclasses
import unittest

from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.constants import CharacterSet
from ascii_glyph_renderer.errors import ConfigurationError


class RenderConfigTests(unittest.TestCase):
    def test_defaults(self):
        cfg = RenderConfig()
        self.assertEqual(cfg.width, 100)
        self.assertEqual(cfg.charset, "@%#*+=-:. ")
        self.assertEqual(cfg.contrast, 1.0)
        self.assertEqual(cfg.brightness, 0.0)
        self.assertEqual(cfg.dither_strength, 0.5)
        self.assertFalse(cfg.sharpening or cfg.dithering or cfg.color_mode or cfg.invert)
        self.assertEqual(cfg.active_palette, CharacterSet.STANDARD)

    def test_detailed_palette_has_70_glyphs(self):
        cfg = RenderConfig(use_detailed_palette=True)
        self.assertEqual(len(cfg.active_palette), 70)

    def test_frozen(self):
        cfg = RenderConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.width = 10

    def test_invalid_values(self):
        bad = [
            {'charset': ''},
            {'width': 0},
            {'width': -3},
            {'width': 1.5},
            {'width': True},
            {'contrast': 0},
            {'contrast': 4.5},
            {'contrast': float('nan')},
            {'brightness': 1.5},
            {'brightness': float('-inf')},
            {'dither_strength': -0.1},
            {'dither_strength': 1.1},
            {'dither_strength': '0.5'},
        ]
        for kwargs in bad:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ConfigurationError):
                    RenderConfig(**kwargs)

    def test_boundaries_accepted(self):
        RenderConfig(contrast=4.0, brightness=-1.0, dither_strength=0.0)
        RenderConfig(contrast=0.01, brightness=1.0, dither_strength=1.0, width=1, charset="#")

    def test_from_options(self):
        cfg = RenderConfig.from_options({
            'width': 40,
            'charSet': '#. ',
            'invertBrightness': True,
            'colorMode': True,
            'contrastFactor': 1.5,
            'brightnessFactor': -0.2,
            'applySharpening': True,
            'applyDithering': True,
            'ditherAmount': 0.3,
            'useDetailedCharSet': False,
        })
        self.assertEqual(cfg, RenderConfig(
            width=40, charset='#. ', invert=True, color_mode=True, contrast=1.5,
            brightness=-0.2, sharpening=True, dithering=True, dither_strength=0.3,
        ))

    def test_from_options_accepts_field_names(self):
        self.assertEqual(RenderConfig.from_options({'charset': '@ '}).charset, '@ ')

    def test_from_options_rejects_unknown_and_duplicates(self):
        with self.assertRaises(ConfigurationError):
            RenderConfig.from_options({'gamma': 2.2})
        with self.assertRaises(ConfigurationError):
            RenderConfig.from_options({'charSet': '@ ', 'charset': '# '})

    def test_replace_validates(self):
        cfg = RenderConfig()
        self.assertEqual(cfg.replace(width=20).width, 20)
        self.assertEqual(cfg.width, 100)
        with self.assertRaises(ConfigurationError):
            cfg.replace(charset='')
        with self.assertRaises(ConfigurationError):
            cfg.replace(gamma=1.0)


if __name__ == "__main__":
    unittest.main()
