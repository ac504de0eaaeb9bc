"""
Fixed 8-colour palette. Surfaces store palette indices, not RGB.
"""

import numpy as np

BLACK = 0
DARK_GRAY = 1
MEDIUM_GRAY = 2
LIGHT_GRAY = 3
WHITE = 4
TEAL = 5
RED = 6
DARK_BLUE = 7

PALETTE: tuple[tuple[int, int, int], ...] = (
    (0x00, 0x00, 0x00),  # black
    (0x80, 0x80, 0x80),  # dark gray
    (0xC0, 0xC0, 0xC0),  # medium gray
    (0xDF, 0xDF, 0xDF),  # light gray
    (0xFF, 0xFF, 0xFF),  # white
    (0x00, 0x80, 0x80),  # teal
    (0xFF, 0x00, 0x00),  # red
    (0x00, 0x00, 0x80),  # dark blue
)

# Lookup table for index -> RGB conversion of whole framebuffers
PALETTE_ARRAY = np.array(PALETTE, dtype=np.uint8)
