"""
Rectangle and point primitives.

A widget's rect places it inside its parent: x/y are relative to the
parent's top-left corner, never absolute screen coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Point:
    """Pixel-space point."""
    x: float = 0
    y: float = 0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """Width/height pair."""
    width: float = 0
    height: float = 0


class HasSize(Protocol):
    width: float
    height: float


@dataclass
class Rect:
    """Widget rectangle."""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def local(self) -> 'Rect':
        """This rect's own coordinate space: same size, origin (0, 0)."""
        return Rect(0, 0, self.width, self.height)

    def contains(self, point: Point) -> bool:
        """Check if point is inside rect."""
        return is_in_rect(point, self)

    def intersects(self, other: 'Rect') -> bool:
        """Check if rectangles overlap."""
        return rect_intersects(self, other)

    def copy(self) -> 'Rect':
        """Create a copy of this rect."""
        return Rect(self.x, self.y, self.width, self.height)

    def describe(self) -> str:
        return (
            f"x={self.x}, y={self.y}, w={self.width}, h={self.height}, "
            f"x2={self.right}, y2={self.bottom}"
        )


ORIGIN = Point(0, 0)


def is_in_rect(point: Point, rect: Rect) -> bool:
    """Half-open containment: the right and bottom edges are outside."""
    return (rect.x <= point.x < rect.x + rect.width and
            rect.y <= point.y < rect.y + rect.height)


def is_rect_contained(inner: Rect, outer: Rect) -> bool:
    """
    Check if inner lies fully within outer.

    Returns True when both rects are the same.
    """
    return (
        inner.x >= outer.x and
        inner.x + inner.width <= outer.x + outer.width and
        inner.y >= outer.y and
        inner.y + inner.height <= outer.y + outer.height
    )


def rect_intersects(a: Rect, b: Rect) -> bool:
    """Strict overlap test. Rects that only share an edge do not intersect."""
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


def normalize_rect(rect: Rect, screen: HasSize) -> Rect:
    """
    Resolve negative placement against the screen.

    A negative x means the rect's right edge sits that many pixels from the
    right edge of the screen; likewise a negative y measures from the bottom.
    On a 100x100 screen, Rect(-10, -10, 20, 20) becomes Rect(70, 70, 20, 20).
    """
    result = rect.copy()
    if result.x < 0:
        result.x = screen.width + result.x - result.width
    if result.y < 0:
        result.y = screen.height + result.y - result.height
    return result


def center_horizontally(size: HasSize, container: Rect) -> int:
    """Left edge x that centres size within container."""
    return math.floor(container.x + (container.width - size.width) / 2)


def center_vertically(size: HasSize, container: Rect) -> int:
    """Top edge y that centres size within container."""
    return math.floor(container.y + (container.height - size.height) / 2)


def center_rect(size: HasSize, container: Rect) -> Point:
    """Top-left corner that centres size within container."""
    return Point(
        center_horizontally(size, container),
        center_vertically(size, container),
    )
