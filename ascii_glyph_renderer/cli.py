"""
ASCII Glyph Renderer - Command Line Interface
=============================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from PIL import Image, ImageDraw

from ascii_glyph_renderer.config import RenderConfig
from ascii_glyph_renderer.constants import CharacterSet
from ascii_glyph_renderer.converter import AsciiArtGenerator
from ascii_glyph_renderer.errors import RenderError
from ascii_glyph_renderer.formatters import AnsiColorFormatter, HtmlFormatter
from ascii_glyph_renderer.glyphs import GlyphGrid
from ascii_glyph_renderer.loader import open_image

logger = logging.getLogger("ascii_glyph_renderer.cli")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='ascii-glyphs',
        description='Convert images to ASCII glyph art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Basic conversion
  %(prog)s image.png -w 80                    # Set width to 80 chars
  %(prog)s https://example.com/cat.jpg        # Load from URL
  %(prog)s image.png --sharpen --dither       # Filters before mapping
  %(prog)s image.png -c -o output.html        # Colored HTML output
  %(prog)s image.png -c --color-mode 256      # 256-color terminal output
        """
    )

    # Input/Output
    parser.add_argument('input', nargs='?', help='Input image file or URL')
    parser.add_argument('-o', '--output', help='Output file (txt, html, or ansi)')

    # Size
    parser.add_argument('-w', '--width', type=int, default=100,
                        help='Output width in characters')

    # Character set
    parser.add_argument('--charset', default='standard',
                        help='Character set: ' + ', '.join(CharacterSet.presets()))
    parser.add_argument('--custom-charset', help='Custom character string (dense to sparse)')
    parser.add_argument('--detailed', action='store_true',
                        help='Use the detailed 70-character palette')
    parser.add_argument('-i', '--invert', action='store_true', help='Invert brightness')

    # Tone
    parser.add_argument('--contrast', type=float, default=1.0,
                        help='Contrast factor (0.5-2.0)')
    parser.add_argument('--brightness', type=float, default=0.0,
                        help='Brightness offset (-0.5-0.5)')

    # Filters
    parser.add_argument('--sharpen', action='store_true', help='Apply unsharp mask')
    parser.add_argument('--dither', action='store_true', help='Apply Floyd-Steinberg dithering')
    parser.add_argument('--dither-amount', type=float, default=0.5,
                        help='Dithering strength (0-1)')

    # Color
    parser.add_argument('-c', '--color', action='store_true', help='Enable color output')
    parser.add_argument('--color-mode', choices=['24bit', '256', '16'],
                        default='24bit', help='Terminal color mode')

    # Other
    parser.add_argument('--demo', action='store_true', help='Render a generated test image')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Translate parsed arguments into a RenderConfig."""
    charset = args.custom_charset if args.custom_charset else CharacterSet.get_preset(args.charset)
    return RenderConfig(
        width=args.width,
        charset=charset,
        use_detailed_palette=args.detailed,
        invert=args.invert,
        contrast=args.contrast,
        brightness=args.brightness,
        color_mode=args.color,
        sharpening=args.sharpen,
        dithering=args.dither,
        dither_strength=args.dither_amount,
    )


def demo_image() -> Image.Image:
    """A small test image: a red disc with a blue square on white."""
    image = Image.new('RGBA', (100, 100), color='white')
    draw = ImageDraw.Draw(image)
    draw.ellipse([10, 10, 90, 90], fill='red', outline='black')
    draw.rectangle([30, 30, 70, 70], fill='blue')
    return image


def write_output(grid: GlyphGrid, path: str, color_mode: str) -> None:
    """Write ``grid`` to ``path``; the format follows the file extension."""
    ext = path.lower().rsplit('.', 1)[-1]

    if ext == 'html':
        content = HtmlFormatter.format(grid)
    elif ext == 'ansi':
        content = AnsiColorFormatter.format(grid, color_mode=color_mode)
    else:  # txt or other
        content = grid.to_text()

    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if not args.demo and not args.input:
        parser.print_help()
        return 0

    try:
        config = build_config(args)
        image = demo_image() if args.demo else open_image(args.input)
        logger.debug("source image: size=%s mode=%s", image.size, image.mode)
        grid = AsciiArtGenerator(config).convert(image)
    except RenderError as e:
        logger.error("%s", e)
        return 1

    logger.debug("output size: %dx%d", grid.width, grid.height)

    if args.output:
        try:
            write_output(grid, args.output, args.color_mode)
        except OSError as e:
            logger.error("Could not write %s: %s", args.output, e)
            return 1
        logger.info("Saved to %s", args.output)
    elif config.color_mode:
        sys.stdout.write(AnsiColorFormatter.format(grid, color_mode=args.color_mode))
    else:
        sys.stdout.write(grid.to_text())

    return 0


if __name__ == '__main__':
    sys.exit(main())
