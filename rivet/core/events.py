"""
Typed widget events.

Uses Enums for event kinds to prevent magic strings. Events are immutable;
the manager delivers translated copies to widgets.

Usage:
    manager.emit_event(MouseEvent(MouseAction.DOWN, Point(10, 20)))
    manager.emit_event(TypedEvent("a"))
    manager.emit_event(KeyEvent(KeyCode.BACKSPACE))
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import ClassVar, Optional, Union

from rivet.core.rect import Point


class EventType(Enum):
    """Top-level event kinds."""
    KEY = "key"
    TYPED = "typed"
    FOCUS = "focus"
    MOUSE = "mouse"


class KeyAction(Enum):
    DOWN = "down"
    UP = "up"


class FocusChange(Enum):
    GAIN = "gain"
    LOSE = "lose"


class MouseAction(Enum):
    DOWN = "down"
    UP = "up"
    MOVE = "move"
    ENTER = "enter"
    LEAVE = "leave"


class KeyCode(IntEnum):
    """Key codes delivered in KeyEvent.key (browser keyCode numbering)."""
    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    END = 35
    HOME = 36
    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40
    DELETE = 46


@dataclass(frozen=True)
class KeyEvent:
    """Physical key press or release."""
    key: int
    action: KeyAction = KeyAction.DOWN

    type: ClassVar[EventType] = EventType.KEY


@dataclass(frozen=True)
class TypedEvent:
    """A character produced by the keyboard."""
    char: str

    type: ClassVar[EventType] = EventType.TYPED


@dataclass(frozen=True)
class FocusEvent:
    """Sent by the manager when a widget gains or loses focus."""
    change: FocusChange

    type: ClassVar[EventType] = EventType.FOCUS

    @property
    def gained(self) -> bool:
        return self.change is FocusChange.GAIN


@dataclass(frozen=True)
class MouseEvent:
    """
    Pointer event.

    Attributes:
        action: What happened
        location: Pointer position (screen space when emitted, widget-local
            when delivered)
        button: Mouse button index for DOWN/UP
        previous_location: Prior pointer position for MOVE/ENTER/LEAVE
    """
    action: MouseAction
    location: Point
    button: int = 0
    previous_location: Optional[Point] = None

    type: ClassVar[EventType] = EventType.MOUSE

    def translated(self, offset: Point) -> 'MouseEvent':
        """Copy of this event moved into the space whose origin is offset."""
        previous = self.previous_location
        if previous is not None:
            previous = previous - offset
        return replace(self, location=self.location - offset, previous_location=previous)


WidgetEvent = Union[KeyEvent, TypedEvent, FocusEvent, MouseEvent]
