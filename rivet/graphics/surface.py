"""
Raster drawing surface with a coordinate transform stack.

Widgets draw in their own local coordinates. Before drawing a widget the
tree pushes that widget's offset; every primitive then lands at the local
coordinates plus the sum of all pushed offsets.

Usage:
    surface = Surface(320, 200)
    surface.push_transform(5, 5)
    surface.push_transform(3, 2)
    surface.draw_pixel(1, 1, WHITE)   # lands at (9, 8)
    surface.pop_transform()
    surface.draw_pixel(1, 1, WHITE)   # lands at (6, 6)
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np

from rivet.core.rect import Point
from rivet.graphics.palette import BLACK, PALETTE_ARRAY


class Surface:
    """
    Palette-indexed framebuffer.

    Pixels live in a (height, width) uint8 array. Several surfaces may share
    one array (e.g. the plain screen and the interface drawer), each with
    its own transform stack.
    """

    def __init__(
        self,
        width: int,
        height: int,
        pixels: Optional[np.ndarray] = None,
    ):
        self.width = int(width)
        self.height = int(height)
        if pixels is None:
            pixels = np.zeros((self.height, self.width), dtype=np.uint8)
        elif pixels.shape != (self.height, self.width):
            raise ValueError(
                f"Pixel buffer shape {pixels.shape} does not match "
                f"surface size {self.width}x{self.height}"
            )
        self.pixels = pixels
        self._transforms: list[tuple[int, int]] = []

    # Transform stack

    @property
    def offset(self) -> Point:
        """Accumulated offset currently applied to every primitive."""
        if not self._transforms:
            return Point(0, 0)
        dx, dy = self._transforms[-1]
        return Point(dx, dy)

    @property
    def transform_depth(self) -> int:
        return len(self._transforms)

    def push_transform(self, dx: float, dy: float) -> None:
        """Push an offset relative to the current one."""
        base_x, base_y = self._transforms[-1] if self._transforms else (0, 0)
        self._transforms.append((base_x + math.floor(dx), base_y + math.floor(dy)))

    def pop_transform(self) -> None:
        """Revert to the previous offset. Popping an empty stack does nothing."""
        if self._transforms:
            self._transforms.pop()

    @contextmanager
    def transform(self, dx: float, dy: float) -> Iterator['Surface']:
        """Scope an offset to a with-block."""
        self.push_transform(dx, dy)
        try:
            yield self
        finally:
            self.pop_transform()

    # Primitives

    def _fill(self, x: float, y: float, width: float, height: float, color: int) -> None:
        ox, oy = self._transforms[-1] if self._transforms else (0, 0)
        x0 = math.floor(x) + ox
        y0 = math.floor(y) + oy
        x1 = max(x0, 0)
        y1 = max(y0, 0)
        x2 = min(x0 + math.floor(width), self.width)
        y2 = min(y0 + math.floor(height), self.height)
        if x1 < x2 and y1 < y2:
            self.pixels[y1:y2, x1:x2] = color

    def draw_pixel(self, x: float, y: float, color: int) -> None:
        self._fill(x, y, 1, 1, color)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: int) -> None:
        """Draw a filled rectangle."""
        self._fill(x, y, width, height, color)

    def draw_row(self, x: float, y: float, width: float, color: int) -> None:
        """Draw a horizontal line one pixel high."""
        self._fill(x, y, width, 1, color)

    def draw_column(self, x: float, y: float, height: float, color: int) -> None:
        """Draw a vertical line one pixel wide."""
        self._fill(x, y, 1, height, color)

    def draw_box(self, x: float, y: float, width: float, height: float, color: int) -> None:
        """Draw a one pixel rectangle outline."""
        self._fill(x, y, width, 1, color)
        self._fill(x, y + height - 1, width, 1, color)
        self._fill(x, y, 1, height, color)
        self._fill(x + width - 1, y, 1, height, color)

    def draw_dithered_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: int,
        color2: int,
    ) -> None:
        """Checkerboard of two colours; color2 on cells where (i + j) is even."""
        self._fill(x, y, width, height, color)

        ox, oy = self._transforms[-1] if self._transforms else (0, 0)
        x0 = math.floor(x) + ox
        y0 = math.floor(y) + oy
        x1, y1 = max(x0, 0), max(y0, 0)
        x2 = min(x0 + math.floor(width), self.width)
        y2 = min(y0 + math.floor(height), self.height)
        if x1 >= x2 or y1 >= y2:
            return

        rows, cols = np.indices((y2 - y1, x2 - x1))
        mask = ((rows + (y1 - y0)) + (cols + (x1 - x0))) % 2 == 0
        region = self.pixels[y1:y2, x1:x2]
        region[mask] = color2

    def clear(self, color: int = BLACK) -> None:
        """Fill the whole buffer, ignoring transforms."""
        self.pixels.fill(color)

    # Read-back

    def get_pixel(self, x: int, y: int) -> int:
        """Palette index at absolute coordinates."""
        return int(self.pixels[y, x])

    def to_rgb(self) -> np.ndarray:
        """(height, width, 3) RGB image of the buffer."""
        return PALETTE_ARRAY[self.pixels]
