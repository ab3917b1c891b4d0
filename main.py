#!/usr/bin/env python3
"""
Image to ASCII Glyph Converter
==============================
Run from a checkout: ``python main.py image.png -w 80``.
"""

import sys

from ascii_glyph_renderer.cli import main


if __name__ == '__main__':
    sys.exit(main())
