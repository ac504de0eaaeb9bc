"""
Binary bitmap fonts.

Glyphs cover printable ASCII 33..126. Each glyph is font_height bytes, one
per row, most significant bit = leftmost pixel, so glyphs are at most 8
pixels wide.

Disk format:
    byte 0      font type (0 = monospace, 1 = variable)
    byte 1      font height
    byte 2      glyph count (always 94)
    H * G bytes glyph rows
    G bytes     glyph widths (variable fonts only)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

FONT_GLYPH_START = 33
FONT_GLYPH_END = 127
FONT_GLYPH_COUNT = FONT_GLYPH_END - FONT_GLYPH_START
MAX_GLYPH_WIDTH = 8
MAX_FONT_HEIGHT = 8

logger = logging.getLogger(__name__)


class PixelTarget(Protocol):
    def draw_pixel(self, x: float, y: float, color: int) -> None: ...


class FontKind(Enum):
    MONOSPACE = 0
    VARIABLE = 1


@dataclass
class BinaryFont:
    """
    Bitmap font data.

    Attributes:
        kind: Monospace or variable width
        font_height: Rows per glyph
        data: Row bytes for all glyphs, glyph-major
        glyph_width: Width of every glyph (monospace only)
        glyph_widths: Per-glyph widths (variable only)
    """
    kind: FontKind
    font_height: int
    data: bytes
    glyph_width: int = MAX_GLYPH_WIDTH
    glyph_widths: list[int] = field(default_factory=list)

    def __post_init__(self):
        if not 1 <= self.font_height <= MAX_FONT_HEIGHT:
            raise ValueError(
                f"Font height is {self.font_height}, expected 1..{MAX_FONT_HEIGHT}"
            )
        widths = [self.glyph_width] if self.kind is FontKind.MONOSPACE else self.glyph_widths
        for width in widths:
            if not 0 <= width <= MAX_GLYPH_WIDTH:
                raise ValueError(
                    f"Glyph width {width} out of range 0..{MAX_GLYPH_WIDTH}"
                )

        expected = self.font_height * FONT_GLYPH_COUNT
        if len(self.data) != expected:
            raise ValueError(
                f"Font data is {len(self.data)} bytes, expected {expected} "
                f"({FONT_GLYPH_COUNT} glyphs x {self.font_height} rows)"
            )
        if self.kind is FontKind.VARIABLE and len(self.glyph_widths) != FONT_GLYPH_COUNT:
            raise ValueError(
                f"Variable font has {len(self.glyph_widths)} widths, "
                f"expected {FONT_GLYPH_COUNT}"
            )

    def width_of(self, glyph: int) -> int:
        """Pixel width of glyph index (0 = '!')."""
        if self.kind is FontKind.MONOSPACE:
            return self.glyph_width
        return self.glyph_widths[glyph]

    @property
    def space_width(self) -> int:
        """Advance used for space and characters without a glyph."""
        if self.kind is FontKind.MONOSPACE:
            return self.glyph_width
        return 3

    @property
    def letter_spacing(self) -> int:
        """Gap after each glyph. Monospace cells already include it."""
        return 0 if self.kind is FontKind.MONOSPACE else 1

    def rows(self, glyph: int) -> bytes:
        start = glyph * self.font_height
        return self.data[start:start + self.font_height]


def glyph_index(char: str) -> int | None:
    """Glyph index for a character, or None if the font has no glyph for it."""
    code = ord(char)
    if FONT_GLYPH_START <= code < FONT_GLYPH_END:
        return code - FONT_GLYPH_START
    return None


def draw_glyph(
    font: BinaryFont,
    glyph: int,
    x: float,
    y: float,
    color: int,
    target: PixelTarget,
) -> int:
    """
    Blit one glyph through target.draw_pixel.

    Returns:
        Width of the glyph drawn
    """
    x = math.floor(x)
    y = math.floor(y)
    width = font.width_of(glyph)
    for j, row in enumerate(font.rows(glyph)):
        for i in range(width):
            if row & (1 << (7 - i)):
                target.draw_pixel(x + i, y + j, color)
    return width


def blank_font(glyph_width: int = 6, font_height: int = 8) -> BinaryFont:
    """Monospace font with empty glyphs. Useful for headless runs."""
    return BinaryFont(
        kind=FontKind.MONOSPACE,
        font_height=font_height,
        data=bytes(FONT_GLYPH_COUNT * font_height),
        glyph_width=glyph_width,
    )


def load_binary_font(data: bytes) -> BinaryFont:
    """Decode the disk format."""
    if len(data) < 3:
        raise ValueError("Font data too short for header")

    kind = FontKind.MONOSPACE if data[0] == 0 else FontKind.VARIABLE
    font_height = data[1]
    glyph_count = data[2]

    if glyph_count != FONT_GLYPH_COUNT:
        raise ValueError(
            f"Font glyph count is {glyph_count}, expected {FONT_GLYPH_COUNT}"
        )

    glyph_data_size = font_height * glyph_count
    glyph_data = bytes(data[3:3 + glyph_data_size])

    logger.debug(
        "Loaded font header: type=%s height=%d glyphs=%d",
        kind.name, font_height, glyph_count,
    )

    if kind is FontKind.MONOSPACE:
        return BinaryFont(kind, font_height, glyph_data, glyph_width=MAX_GLYPH_WIDTH)

    widths = list(data[3 + glyph_data_size:3 + glyph_data_size + glyph_count])
    return BinaryFont(kind, font_height, glyph_data, glyph_widths=widths)


def font_to_disk_format(font: BinaryFont) -> bytes:
    """Encode the disk format."""
    header = bytes([font.kind.value, font.font_height, FONT_GLYPH_COUNT])
    widths = bytes(font.glyph_widths) if font.kind is FontKind.VARIABLE else b""
    return header + bytes(font.data) + widths


def load_font_file(path: Path | str) -> BinaryFont:
    """Read and decode a .fontbin file."""
    return load_binary_font(Path(path).read_bytes())


def rasterize_system_font(size: int = 11) -> BinaryFont:
    """
    Build a variable-width font from pygame's default font.

    Glyphs are rendered without antialiasing, cropped to the shared ink
    rows across the whole character set (at most 8) and to each glyph's
    own ink columns (at most 8).
    """
    import pygame

    pygame.font.init()
    source = pygame.font.Font(None, size)

    bitmaps: list[list[list[bool]]] = []
    for code in range(FONT_GLYPH_START, FONT_GLYPH_END):
        rendered = source.render(chr(code), False, (255, 255, 255), (0, 0, 0))
        width, height = rendered.get_size()
        bitmaps.append([
            [rendered.get_at((x, y)).r > 0 for x in range(width)]
            for y in range(height)
        ])

    inked_rows = [
        y
        for bitmap in bitmaps
        for y, row in enumerate(bitmap)
        if any(row)
    ]
    top = min(inked_rows) if inked_rows else 0
    bottom = max(inked_rows) + 1 if inked_rows else 1
    font_height = min(bottom - top, MAX_FONT_HEIGHT)
    # Keep the baseline: drop rows from the top when the ink is too tall
    top = bottom - font_height

    data = bytearray()
    widths: list[int] = []
    for bitmap in bitmaps:
        rows = bitmap[top:bottom]
        columns = [x for row in rows for x, inked in enumerate(row) if inked]
        left = min(columns) if columns else 0
        width = min((max(columns) - left + 1) if columns else 2, MAX_GLYPH_WIDTH)
        widths.append(width)
        for row in rows:
            value = 0
            for i in range(width):
                if left + i < len(row) and row[left + i]:
                    value |= 1 << (7 - i)
            data.append(value)
        data.extend(bytes(font_height - len(rows)))

    return BinaryFont(FontKind.VARIABLE, font_height, bytes(data), glyph_widths=widths)
