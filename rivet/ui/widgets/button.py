"""
Push buttons.

A press starts with mouse-down inside the button, which captures the
mouse; the click fires only if the release also lands inside.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from rivet.core.events import EventType, MouseAction
from rivet.core.rect import Point, Rect, is_in_rect
from rivet.graphics.palette import BLACK, DARK_GRAY
from rivet.ui.base_widget import BaseWidget

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.ui.manager import Manager


class Button(BaseWidget):
    """
    Clickable bevelled button.

    Features:
    - Mouse capture while pressed
    - Pressed state follows the pointer while dragging
    - Disabled state ignores input
    """

    kind = "button"

    def __init__(self, manager: 'Manager', rect: Rect, on_click: Callable[[], None]):
        super().__init__(manager, rect)
        self.on_click = on_click
        self.disabled = False
        self.pressed = False
        self._mouse_down_inside = False

    def _reset_press(self) -> None:
        self.pressed = False
        self._mouse_down_inside = False

    def handle_event(self, event: 'WidgetEvent') -> None:
        if self.disabled or event.type is not EventType.MOUSE:
            return

        mouse_inside = is_in_rect(event.location, self.rect.local())

        if event.action is MouseAction.DOWN:
            self._mouse_down_inside = True
            self.pressed = True
            self.manager.request_capture(self)
        elif event.action is MouseAction.MOVE:
            if self.manager.captured_widget is self:
                self.pressed = self._mouse_down_inside and mouse_inside
            else:
                # Released elsewhere earlier; the old press is stale
                self._reset_press()
        elif event.action is MouseAction.UP:
            if self._mouse_down_inside and mouse_inside:
                self.on_click()
            self._reset_press()

    def draw(self, ui: 'InterfaceDrawer') -> None:
        if self.pressed:
            ui.draw_button_pressed(0, 0, self.rect.width, self.rect.height)
        else:
            ui.draw_button(0, 0, self.rect.width, self.rect.height)


class TextButton(Button):
    """Button sized to fit its label."""

    kind = "text_button"

    HEIGHT = 19
    PADDING = 10

    def __init__(
        self,
        manager: 'Manager',
        location: Point,
        label: str,
        on_click: Callable[[], None],
    ):
        width = manager.ui.text_width(label) + self.PADDING
        super().__init__(manager, Rect(location.x, location.y, width, self.HEIGHT), on_click)
        self.label = label

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)
        color = DARK_GRAY if self.disabled else BLACK
        if self.pressed:
            ui.draw_text(self.label, 5, 7, color)
        else:
            ui.draw_text(self.label, 4, 6, color)


class FixedWidthTextButton(Button):
    """
    Button with a fixed width.

    The label is centred if it fits, otherwise left-aligned and clamped.
    """

    kind = "fixed_width_text_button"

    HEIGHT = 19
    MARGIN_LEFT = 5
    MARGIN_RIGHT = 5
    MARGIN_TOP = 6

    def __init__(
        self,
        manager: 'Manager',
        location: Point,
        width: float,
        label: str,
        on_click: Callable[[], None],
    ):
        super().__init__(manager, Rect(location.x, location.y, width, self.HEIGHT), on_click)
        self.label = label

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)

        available_width = self.rect.width - self.MARGIN_LEFT - self.MARGIN_RIGHT
        full_width = ui.text_width(self.label)

        text_x = self.MARGIN_LEFT
        if full_width < available_width:
            text_x = math.floor((self.rect.width - full_width) / 2)
        text_y = self.MARGIN_TOP

        # Sunken look
        if self.pressed:
            text_x += 1
            text_y += 1

        color = DARK_GRAY if self.disabled else BLACK
        ui.draw_text_clamped(self.label, text_x, text_y, available_width, color)
