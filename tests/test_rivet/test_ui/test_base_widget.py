import pytest

from rivet.core.rect import Rect
from rivet.graphics.palette import RED, WHITE
from rivet.ui.base_widget import BaseWidget

class Swatch(BaseWidget):
    kind = "swatch"

    def __init__(self, manager, rect, color):
        super().__init__(manager, rect)
        self.color = color

    def draw(self, ui):
        ui.draw_pixel(0, 0, self.color)

def test_add_widget_chains(manager):
    parent = BaseWidget(manager, Rect(0, 0, 100, 100))
    a = BaseWidget(manager, Rect(0, 0, 10, 10))
    b = BaseWidget(manager, Rect(10, 0, 10, 10))

    assert parent.add_widget(a).add_widget(b) is parent
    assert parent.children == [a, b]

def test_child_must_fit_parent(manager):
    parent = BaseWidget(manager, Rect(50, 50, 100, 100))
    # Local bounds apply, not the parent's position in its own parent
    child = BaseWidget(manager, Rect(60, 60, 50, 50))

    with pytest.raises(ValueError) as exc_info:
        parent.add_widget(child)

    message = str(exc_info.value)
    assert "outside parent bounds" in message
    assert "right by 10px" in message
    assert "bottom by 10px" in message
    assert parent.children == []

def test_sibling_collision_rejected(manager):
    parent = BaseWidget(manager, Rect(0, 0, 100, 100))
    first = BaseWidget(manager, Rect(0, 0, 20, 20))
    parent.add_widget(first)

    with pytest.raises(ValueError, match="collision"):
        parent.add_widget(BaseWidget(manager, Rect(10, 10, 20, 20)))
    assert parent.children == [first]

def test_touching_siblings_allowed(manager):
    parent = BaseWidget(manager, Rect(0, 0, 100, 100))
    parent.add_widget(BaseWidget(manager, Rect(0, 0, 20, 20)))
    parent.add_widget(BaseWidget(manager, Rect(20, 0, 20, 20)))
    assert len(parent.children) == 2

def test_negative_position_normalized_against_screen(manager):
    widget = BaseWidget(manager, Rect(-10, -10, 20, 20))
    assert widget.rect == Rect(290, 170, 20, 20)

def test_delegate_draw_applies_nested_offsets(manager, drawer):
    root = Swatch(manager, Rect(5, 5, 100, 100), WHITE)
    child = Swatch(manager, Rect(3, 2, 10, 10), RED)
    root.add_widget(child)

    root.delegate_draw(drawer)

    assert drawer.get_pixel(5, 5) == WHITE
    assert drawer.get_pixel(8, 7) == RED
    assert drawer.transform_depth == 0

def test_repr_uses_kind(manager):
    widget = Swatch(manager, Rect(1, 2, 3, 4), WHITE)
    assert repr(widget) == "swatch(pos=(1, 2), size=(3, 4))"
