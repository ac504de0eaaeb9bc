from rivet.core.rect import (
    Point,
    Rect,
    Size,
    center_rect,
    is_in_rect,
    is_rect_contained,
    normalize_rect,
    rect_intersects,
)

def test_point_arithmetic():
    assert Point(5, 5) + Point(3, 2) == Point(8, 7)
    assert Point(9, 8) - Point(5, 5) == Point(4, 3)

def test_is_in_rect_is_half_open():
    rect = Rect(10, 10, 20, 20)
    assert is_in_rect(Point(10, 10), rect)
    assert is_in_rect(Point(29, 29), rect)
    assert not is_in_rect(Point(30, 15), rect)
    assert not is_in_rect(Point(15, 30), rect)
    assert not is_in_rect(Point(9, 15), rect)

def test_rect_contained():
    outer = Rect(0, 0, 100, 100)
    assert is_rect_contained(Rect(0, 0, 100, 100), outer)
    assert is_rect_contained(Rect(10, 10, 50, 50), outer)
    assert not is_rect_contained(Rect(60, 10, 50, 50), outer)
    assert not is_rect_contained(Rect(-1, 0, 10, 10), outer)

def test_touching_rects_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not rect_intersects(a, Rect(10, 0, 10, 10))
    assert not rect_intersects(a, Rect(0, 10, 10, 10))
    assert rect_intersects(a, Rect(9, 9, 10, 10))
    assert a.intersects(Rect(5, 5, 2, 2))

def test_normalize_negative_coordinates():
    screen = Size(100, 100)
    assert normalize_rect(Rect(-10, -10, 20, 20), screen) == Rect(70, 70, 20, 20)
    assert normalize_rect(Rect(5, -1, 10, 10), screen) == Rect(5, 89, 10, 10)

def test_normalize_returns_copy():
    rect = Rect(1, 2, 3, 4)
    result = normalize_rect(rect, Size(100, 100))
    assert result == rect
    assert result is not rect

def test_center_rect_floors():
    location = center_rect(Size(100, 60), Rect(0, 0, 320, 200))
    assert location == Point(110, 70)

    location = center_rect(Size(3, 3), Rect(10, 10, 10, 10))
    assert location == Point(13, 13)

def test_local_rect():
    rect = Rect(40, 50, 20, 10)
    assert rect.local() == Rect(0, 0, 20, 10)
    assert rect.right == 60
    assert rect.bottom == 60
    assert rect.origin == Point(40, 50)
