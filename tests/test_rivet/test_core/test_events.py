import dataclasses

import pytest

from rivet.core.events import (
    EventType,
    FocusChange,
    FocusEvent,
    KeyAction,
    KeyCode,
    KeyEvent,
    MouseAction,
    MouseEvent,
    TypedEvent,
)
from rivet.core.rect import Point

def test_event_types():
    assert KeyEvent(KeyCode.ENTER).type is EventType.KEY
    assert TypedEvent("a").type is EventType.TYPED
    assert FocusEvent(FocusChange.GAIN).type is EventType.FOCUS
    assert MouseEvent(MouseAction.DOWN, Point(0, 0)).type is EventType.MOUSE

def test_key_event_defaults_to_down():
    assert KeyEvent(KeyCode.LEFT).action is KeyAction.DOWN

def test_key_codes_match_browser_numbering():
    assert KeyCode.BACKSPACE == 8
    assert KeyCode.LEFT == 37
    assert KeyCode.RIGHT == 39
    assert KeyCode.HOME == 36
    assert KeyCode.END == 35

def test_focus_event_gained():
    assert FocusEvent(FocusChange.GAIN).gained
    assert not FocusEvent(FocusChange.LOSE).gained

def test_mouse_event_translated():
    event = MouseEvent(MouseAction.MOVE, Point(50, 40), previous_location=Point(48, 39))
    local = event.translated(Point(10, 20))

    assert local.location == Point(40, 20)
    assert local.previous_location == Point(38, 19)
    assert local.action is MouseAction.MOVE
    # Original untouched
    assert event.location == Point(50, 40)

def test_mouse_event_translated_without_previous():
    event = MouseEvent(MouseAction.DOWN, Point(5, 5), button=2)
    local = event.translated(Point(5, 5))
    assert local.location == Point(0, 0)
    assert local.previous_location is None
    assert local.button == 2

def test_events_are_immutable():
    event = TypedEvent("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.char = "y"
