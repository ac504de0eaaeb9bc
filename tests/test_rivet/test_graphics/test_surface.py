import numpy as np
import pytest

from rivet.core.rect import Point
from rivet.graphics.palette import BLACK, PALETTE, RED, TEAL, WHITE
from rivet.graphics.surface import Surface

def test_transform_composition(surface):
    surface.push_transform(5, 5)
    surface.push_transform(3, 2)
    surface.draw_pixel(1, 1, WHITE)
    assert surface.get_pixel(9, 8) == WHITE

    surface.pop_transform()
    surface.draw_pixel(1, 1, RED)
    assert surface.get_pixel(6, 6) == RED

def test_transform_offsets_are_floored(surface):
    surface.push_transform(2.7, 3.2)
    assert surface.offset == Point(2, 3)

def test_pop_empty_stack_is_noop(surface):
    surface.pop_transform()
    assert surface.transform_depth == 0
    assert surface.offset == Point(0, 0)

def test_transform_context_manager_restores(surface):
    with surface.transform(10, 10):
        with surface.transform(1, 1):
            assert surface.offset == Point(11, 11)
        assert surface.offset == Point(10, 10)
    assert surface.transform_depth == 0

def test_draw_rect_clips_to_bounds(surface):
    surface.draw_rect(310, 190, 50, 50, TEAL)
    assert surface.get_pixel(319, 199) == TEAL
    assert surface.get_pixel(309, 199) == BLACK

def test_draw_rect_fully_offscreen(surface):
    surface.draw_rect(-100, -100, 10, 10, WHITE)
    assert not surface.pixels.any()

def test_draw_box_outline(surface):
    surface.draw_box(0, 0, 5, 5, WHITE)
    assert surface.get_pixel(0, 0) == WHITE
    assert surface.get_pixel(4, 4) == WHITE
    assert surface.get_pixel(2, 2) == BLACK

def test_row_and_column(surface):
    surface.draw_row(2, 3, 4, WHITE)
    surface.draw_column(10, 0, 3, RED)
    assert list(surface.pixels[3, 2:6]) == [WHITE] * 4
    assert surface.get_pixel(6, 3) == BLACK
    assert list(surface.pixels[0:3, 10]) == [RED] * 3

def test_dithered_rect(surface):
    surface.draw_dithered_rect(0, 0, 2, 2, WHITE, RED)
    assert surface.get_pixel(0, 0) == RED
    assert surface.get_pixel(1, 0) == WHITE
    assert surface.get_pixel(0, 1) == WHITE
    assert surface.get_pixel(1, 1) == RED

def test_shared_buffer():
    a = Surface(10, 10)
    b = Surface(10, 10, pixels=a.pixels)
    b.push_transform(5, 5)
    b.draw_pixel(0, 0, WHITE)
    assert a.get_pixel(5, 5) == WHITE
    assert a.transform_depth == 0

def test_mismatched_buffer():
    with pytest.raises(ValueError):
        Surface(10, 10, pixels=np.zeros((5, 5), dtype=np.uint8))

def test_to_rgb(surface):
    surface.clear(TEAL)
    rgb = surface.to_rgb()
    assert rgb.shape == (200, 320, 3)
    assert tuple(rgb[0, 0]) == PALETTE[TEAL]
