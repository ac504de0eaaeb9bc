"""
Interface drawer: window chrome and text on top of the raster surface.

All methods go through the surface primitives, so they respect the
transform stack and widgets can call them with local coordinates.

Usage:
    drawer = InterfaceDrawer(font, 320, 200)
    drawer.draw_window(10, 10, 100, 60)
    drawer.draw_text("Hello", 14, 14, color=WHITE, bold=True)
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from rivet.graphics.font import BinaryFont, draw_glyph, glyph_index
from rivet.graphics.palette import (
    BLACK,
    DARK_GRAY,
    MEDIUM_GRAY,
    LIGHT_GRAY,
    WHITE,
)
from rivet.graphics.surface import Surface


class InterfaceDrawer(Surface):
    """Surface with bevelled widgets and bitmap text."""

    def __init__(
        self,
        font: BinaryFont,
        width: int,
        height: int,
        pixels: Optional[np.ndarray] = None,
    ):
        super().__init__(width, height, pixels)
        self.font = font

    # Chrome

    def _bevel(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        outer_light: int,
        outer_dark: int,
        inner_light: int,
        inner_dark: int,
    ) -> None:
        self.draw_row(x, y, w - 1, outer_light)
        self.draw_column(x, y, h - 1, outer_light)
        self.draw_row(x, y + h - 1, w, outer_dark)
        self.draw_column(x + w - 1, y, h, outer_dark)
        self.draw_row(x + 1, y + 1, w - 2, inner_light)
        self.draw_column(x + 1, y + 1, h - 2, inner_light)
        self.draw_row(x + 1, y + h - 2, w - 2, inner_dark)
        self.draw_column(x + w - 2, y + 1, h - 2, inner_dark)

    def draw_window(self, x: float, y: float, w: float, h: float) -> None:
        """Raised window frame with medium gray body."""
        self._bevel(x, y, w, h, LIGHT_GRAY, BLACK, WHITE, DARK_GRAY)
        self.draw_rect(x + 2, y + 2, w - 4, h - 4, MEDIUM_GRAY)

    def draw_button(self, x: float, y: float, w: float, h: float) -> None:
        """Raised button."""
        self._bevel(x, y, w, h, WHITE, BLACK, LIGHT_GRAY, DARK_GRAY)
        self.draw_rect(x + 2, y + 2, w - 4, h - 4, MEDIUM_GRAY)

    def draw_button_pressed(self, x: float, y: float, w: float, h: float) -> None:
        """Sunken button."""
        self._bevel(x, y, w, h, BLACK, WHITE, DARK_GRAY, LIGHT_GRAY)
        self.draw_rect(x + 2, y + 2, w - 4, h - 4, MEDIUM_GRAY)

    def draw_panel(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        background: Optional[int] = None,
    ) -> None:
        """Sunken panel; the body is only filled when background is given."""
        self._bevel(x, y, w, h, DARK_GRAY, WHITE, BLACK, LIGHT_GRAY)
        if background is not None:
            self.draw_rect(x + 2, y + 2, w - 4, h - 4, background)

    # Text measurement

    @property
    def font_height(self) -> int:
        return self.font.font_height

    def char_advance(self, char: str, bold: bool = False) -> int:
        glyph = glyph_index(char)
        if glyph is None:
            return self.font.space_width
        width = self.font.width_of(glyph) + self.font.letter_spacing
        return width + 1 if bold else width

    def text_width(self, text: str, bold: bool = False) -> int:
        """Pixel width of a single line of text."""
        return sum(self.char_advance(char, bold) for char in text)

    def truncate_text_to_width(self, text: str, max_width: float, bold: bool = False) -> str:
        """Longest prefix of text that fits within max_width."""
        width = 0
        for i, char in enumerate(text):
            width += self.char_advance(char, bold)
            if width > max_width:
                return text[:i]
        return text

    def wrap_text(self, text: str, max_width: float) -> list[str]:
        """Word-wrap text to fit within max_width. Overlong words get a line of their own."""
        lines: list[str] = []
        for paragraph in text.split("\n"):
            current_line = ""
            for word in paragraph.split(" "):
                test_line = current_line + (" " if current_line else "") + word
                if self.text_width(test_line) <= max_width:
                    current_line = test_line
                else:
                    if current_line:
                        lines.append(current_line)
                    current_line = word
            lines.append(current_line)
        return lines

    # Text drawing

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: int = BLACK,
        bold: bool = False,
    ) -> int:
        """
        Draw a single line of text.

        Bold text is drawn twice, the second pass one pixel to the right.

        Returns:
            Width of the drawn text
        """
        cursor = x
        for char in text:
            glyph = glyph_index(char)
            if glyph is not None:
                draw_glyph(self.font, glyph, cursor, y, color, self)
                if bold:
                    draw_glyph(self.font, glyph, cursor + 1, y, color, self)
            cursor += self.char_advance(char, bold)
        return int(cursor - x)

    def draw_text_block(
        self,
        text: str,
        x: float,
        y: float,
        line_spacing: int = 2,
        color: int = BLACK,
    ) -> int:
        """
        Draw newline-separated lines.

        Returns:
            Total height used
        """
        line_height = self.font_height + line_spacing
        lines = text.split("\n")
        for i, line in enumerate(lines):
            self.draw_text(line, x, y + i * line_height, color)
        return len(lines) * line_height

    def draw_wrapped_text(
        self,
        text: str,
        x: float,
        y: float,
        max_width: float,
        line_spacing: int = 2,
        color: int = BLACK,
    ) -> int:
        """
        Draw word-wrapped text; each line is clamped to max_width.

        Returns:
            Total height used
        """
        line_height = self.font_height + line_spacing
        lines = self.wrap_text(text, max_width)
        for i, line in enumerate(lines):
            self.draw_text_clamped(line, x, y + i * line_height, max_width, color)
        return len(lines) * line_height

    def draw_text_clamped(
        self,
        text: str,
        x: float,
        y: float,
        max_width: float,
        color: int = BLACK,
        bold: bool = False,
    ) -> int:
        """Draw only the characters that fit within max_width."""
        return self.draw_text(self.truncate_text_to_width(text, max_width, bold), x, y, color, bold)
