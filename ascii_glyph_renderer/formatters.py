"""
ASCII Glyph Renderer - Formatters
=================================
Presentation adapters for a GlyphGrid: plain text, ANSI terminal colors
and HTML. All of them read the same grid; none of them feed back into
rendering.
"""

from typing import Literal, Optional

from ascii_glyph_renderer.glyphs import RGB, GlyphGrid


ColorMode = Literal['24bit', '256', '16']


# =============================================================================
# PLAIN TEXT
# =============================================================================

class PlainTextFormatter:
    """Characters only, each row terminated by a newline."""

    @staticmethod
    def format(grid: GlyphGrid) -> str:
        return grid.to_text()


# =============================================================================
# ANSI COLOR OUTPUT
# =============================================================================

class AnsiColorFormatter:
    """Format glyphs with ANSI color codes for terminal output."""

    # ANSI escape codes
    RESET = "\033[0m"
    BOLD = "\033[1m"

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 24-bit ANSI color code (true color)."""
        code = 38 if foreground else 48
        return f"\033[{code};2;{r};{g};{b}m"

    @staticmethod
    def rgb_to_ansi_256(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 256-color ANSI code."""
        if r == g == b:
            # Grayscale ramp
            if r < 8:
                color = 16
            elif r > 248:
                color = 231
            else:
                color = round((r - 8) / 247 * 24) + 232
        else:
            # Color cube (6x6x6)
            color = 16 + (36 * round(r / 255 * 5)) + (6 * round(g / 255 * 5)) + round(b / 255 * 5)

        code = 38 if foreground else 48
        return f"\033[{code};5;{color}m"

    @staticmethod
    def rgb_to_ansi_16(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 16-color ANSI code."""
        intensity = (r + g + b) / 3
        bright = intensity > 127

        r_bit = 1 if r > 127 else 0
        g_bit = 1 if g > 127 else 0
        b_bit = 1 if b > 127 else 0

        color = r_bit + (g_bit << 1) + (b_bit << 2)

        if foreground:
            code = 90 + color if bright else 30 + color
        else:
            code = 100 + color if bright else 40 + color

        return f"\033[{code}m"

    @classmethod
    def color_code(cls, color: RGB, color_mode: ColorMode = '24bit',
                   foreground: bool = True) -> str:
        r, g, b = color
        if color_mode == '24bit':
            return cls.rgb_to_ansi_24bit(r, g, b, foreground)
        elif color_mode == '256':
            return cls.rgb_to_ansi_256(r, g, b, foreground)
        elif color_mode == '16':
            return cls.rgb_to_ansi_16(r, g, b, foreground)
        raise ValueError(f"Unknown color mode: {color_mode!r}")

    @classmethod
    def format(cls, grid: GlyphGrid,
               color_mode: ColorMode = '24bit',
               background: bool = False,
               bold: bool = False) -> str:
        """
        Format a glyph grid with ANSI colors.

        Args:
            grid: GlyphGrid, colored or not
            color_mode: Color mode ('24bit', '256', or '16')
            background: Apply color to background instead of foreground
            bold: Apply bold styling

        Returns:
            String with ANSI color codes, one newline-terminated line per row.
            A grid without colors is returned as plain text.
        """
        if not grid.has_color:
            return grid.to_text()

        output_lines = []

        for row in grid:
            output = cls.BOLD if bold else ""

            # Only emit a code when the color changes
            prev_color: Optional[RGB] = None
            for glyph in row:
                if glyph.color != prev_color:
                    if glyph.color is None:
                        output += cls.RESET + (cls.BOLD if bold else "")
                    else:
                        output += cls.color_code(glyph.color, color_mode, not background)
                    prev_color = glyph.color
                output += glyph.char

            output += cls.RESET
            output_lines.append(output + '\n')

        return ''.join(output_lines)


# =============================================================================
# HTML OUTPUT
# =============================================================================

class HtmlFormatter:
    """Format glyphs as a standalone HTML page."""

    @staticmethod
    def format(grid: GlyphGrid,
               font_size: str = "8px",
               font_family: str = "monospace",
               background_color: str = "#000000",
               foreground_color: str = "#FFFFFF",
               line_height: float = 0.8) -> str:
        """
        Format a glyph grid as HTML.

        Args:
            grid: GlyphGrid with optional color data
            font_size: CSS font size
            font_family: CSS font family
            background_color: Background color
            foreground_color: Text color for uncolored glyphs
            line_height: Line height multiplier

        Returns:
            HTML string
        """
        html = f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>
        .ascii-art {{
            font-family: {font_family};
            font-size: {font_size};
            line-height: {line_height};
            background-color: {background_color};
            color: {foreground_color};
            white-space: pre;
            display: inline-block;
            padding: 10px;
        }}
    </style>
</head>
<body>
<div class="ascii-art">
"""

        for row in grid:
            prev_color: Optional[RGB] = None
            span_open = False

            for glyph in row:
                if glyph.color != prev_color:
                    if span_open:
                        html += "</span>"
                        span_open = False
                    if glyph.color is not None:
                        r, g, b = glyph.color
                        html += f'<span style="color:rgb({r},{g},{b})">'
                        span_open = True
                    prev_color = glyph.color

                escaped_char = glyph.char.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
                html += escaped_char

            if span_open:
                html += "</span>"
            html += '\n'

        html += """</div>
</body>
</html>"""

        return html
