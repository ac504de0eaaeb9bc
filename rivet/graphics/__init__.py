"""
Raster graphics: palette, transform-aware surface, bitmap fonts and
the interface drawer used by widgets.
"""

from rivet.graphics.palette import (
    BLACK,
    DARK_GRAY,
    MEDIUM_GRAY,
    LIGHT_GRAY,
    WHITE,
    TEAL,
    RED,
    DARK_BLUE,
    PALETTE,
    PALETTE_ARRAY,
)
from rivet.graphics.surface import Surface
from rivet.graphics.font import (
    BinaryFont,
    FontKind,
    FONT_GLYPH_COUNT,
    blank_font,
    draw_glyph,
    glyph_index,
    load_binary_font,
    load_font_file,
    font_to_disk_format,
    rasterize_system_font,
)
from rivet.graphics.drawer import InterfaceDrawer

__all__ = [
    # Palette
    "BLACK",
    "DARK_GRAY",
    "MEDIUM_GRAY",
    "LIGHT_GRAY",
    "WHITE",
    "TEAL",
    "RED",
    "DARK_BLUE",
    "PALETTE",
    "PALETTE_ARRAY",
    # Surfaces
    "Surface",
    "InterfaceDrawer",
    # Fonts
    "BinaryFont",
    "FontKind",
    "FONT_GLYPH_COUNT",
    "blank_font",
    "draw_glyph",
    "glyph_index",
    "load_binary_font",
    "load_font_file",
    "font_to_disk_format",
    "rasterize_system_font",
]
