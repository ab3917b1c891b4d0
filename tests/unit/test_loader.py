import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests
from PIL import Image

from ascii_glyph_renderer.converter import AsciiArtGenerator, convert_url, image_to_glyphs
from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.errors import ConfigurationError, ImageLoadError
from ascii_glyph_renderer.loader import buffer_from_image, load_buffer, open_image, target_size


def png_bytes(size=(8, 8), color=(0, 0, 0)):
    out = io.BytesIO()
    Image.new("RGB", size, color).save(out, format="PNG")
    return out.getvalue()


class TargetSizeTests(unittest.TestCase):
    def test_half_height_for_glyph_aspect(self):
        self.assertEqual(target_size(200, 100, 80), (80, 20))
        self.assertEqual(target_size(100, 100, 10), (10, 5))

    def test_at_least_one_row(self):
        self.assertEqual(target_size(100, 1, 10), (10, 1))

    def test_invalid(self):
        with self.assertRaises(ConfigurationError):
            target_size(10, 10, 0)
        with self.assertRaises(ImageLoadError):
            target_size(0, 10, 5)


class OpenImageTests(unittest.TestCase):
    def test_path_and_file_url(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "img.png"
            path.write_bytes(png_bytes((6, 4)))
            self.assertEqual(open_image(path).size, (6, 4))
            self.assertEqual(open_image(str(path)).size, (6, 4))
            self.assertEqual(open_image(path.as_uri()).size, (6, 4))

    def test_missing_and_corrupt_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ImageLoadError):
                open_image(Path(tmp) / "missing.png")
            junk = Path(tmp) / "junk.png"
            junk.write_bytes(b"not an image")
            with self.assertRaises(ImageLoadError):
                open_image(junk)

    def test_http(self):
        response = mock.Mock(content=png_bytes((5, 3)))
        with mock.patch("ascii_glyph_renderer.loader.requests.get", return_value=response) as get:
            image = open_image("https://example.com/a.png")
        self.assertEqual(image.size, (5, 3))
        get.assert_called_once_with("https://example.com/a.png", timeout=30)

    def test_http_error(self):
        response = mock.Mock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        with mock.patch("ascii_glyph_renderer.loader.requests.get", return_value=response):
            with self.assertRaises(ImageLoadError):
                open_image("http://example.com/missing.png")


class ConverterTests(unittest.TestCase):
    def test_buffer_from_image(self):
        buf = buffer_from_image(Image.new("RGB", (40, 20), (1, 2, 3)), 10)
        self.assertEqual(buf.size, (10, 2))
        self.assertEqual(buf.pixel(0, 0)[3], 255)

    def test_convert_black_and_white(self):
        generator = AsciiArtGenerator(RenderConfig(width=10))
        black = generator.convert(Image.new("RGB", (40, 40), (0, 0, 0)))
        white = generator.convert(Image.new("RGB", (40, 40), (255, 255, 255)))
        self.assertEqual((black.width, black.height), (10, 5))
        self.assertEqual(set(black.to_text()), {" ", "\n"})
        self.assertEqual(set(white.to_text()), {"@", "\n"})

    def test_transparent_image(self):
        grid = AsciiArtGenerator(RenderConfig(width=4)).convert(Image.new("RGBA", (8, 8), (255, 0, 0, 0)))
        self.assertEqual(grid.lines, ["    ", "    "])

    def test_image_to_glyphs_option_names(self):
        grid = image_to_glyphs(Image.new("RGB", (20, 20), (255, 255, 255)),
                               width=6, charSet="#.", colorMode=True)
        self.assertEqual(grid.lines[0], "######")
        self.assertTrue(grid.has_color)

    def test_convert_source(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "img.png"
            path.write_bytes(png_bytes((16, 8)))
            grid = AsciiArtGenerator(RenderConfig(width=8)).convert_source(path)
        self.assertEqual((grid.width, grid.height), (8, 2))

    def test_convert_url_and_load_buffer(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "img.png"
            path.write_bytes(png_bytes((12, 12), (255, 255, 255)))
            grid = convert_url(path.as_uri(), RenderConfig(width=4, charset="#."))
            buf = load_buffer(path, 6)
        self.assertEqual(grid.lines, ["####", "####"])
        self.assertEqual(buf.size, (6, 3))


if __name__ == "__main__":
    unittest.main()
