"""
Single-line text input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from rivet.core.events import EventType, KeyAction, KeyCode, MouseAction
from rivet.core.rect import Point, Rect, is_in_rect
from rivet.graphics.palette import BLACK, DARK_BLUE, LIGHT_GRAY, WHITE
from rivet.ui.base_widget import BaseWidget

if TYPE_CHECKING:
    from rivet.core.events import KeyEvent, WidgetEvent
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.ui.manager import Manager


class TextInput(BaseWidget):
    """
    Text input field.

    Features:
    - Click to focus and place the cursor
    - Typed characters insert at the cursor (only while focused)
    - Backspace/Delete, Left/Right, Home/End editing
    - Max length limit
    """

    kind = "text_input"

    HEIGHT = 20
    TEXT_X = 4
    TEXT_Y = 6
    CURSOR_HEIGHT = 10

    def __init__(
        self,
        manager: 'Manager',
        location: Point,
        width: float,
        max_length: int,
    ):
        if max_length <= 0:
            raise ValueError(f"TextInput max_length must be positive, got {max_length}")
        super().__init__(manager, Rect(location.x, location.y, width, self.HEIGHT))
        self.max_length = max_length
        self.value = ""
        self.cursor = 0
        self.focused = False

        # Callbacks
        self.on_change: Optional[Callable[[str], None]] = None
        self.on_submit: Optional[Callable[[str], None]] = None

    # Input

    def handle_event(self, event: 'WidgetEvent') -> None:
        if event.type is EventType.FOCUS:
            self.focused = event.gained
            self.cursor = min(self.cursor, len(self.value))
            return

        if event.type is EventType.MOUSE:
            if event.action is MouseAction.DOWN:
                self.manager.request_focus(self)
                if is_in_rect(event.location, self.rect.local()):
                    self.cursor = self._cursor_at(event.location.x - self.TEXT_X)
        elif event.type is EventType.TYPED and self.focused:
            self.insert_text(event.char)
        elif event.type is EventType.KEY and self.focused:
            self._handle_key(event)

    def _cursor_at(self, x: float) -> int:
        """Character boundary closest to x (relative to the text start)."""
        best_position = 0
        best_distance = abs(x)
        for i in range(1, len(self.value) + 1):
            distance = abs(x - self.manager.ui.text_width(self.value[:i]))
            if distance < best_distance:
                best_distance = distance
                best_position = i
        return best_position

    def _handle_key(self, event: 'KeyEvent') -> None:
        if event.action is not KeyAction.DOWN:
            return

        key = event.key
        if key == KeyCode.BACKSPACE and self.cursor > 0:
            self._set_value(self.value[:self.cursor - 1] + self.value[self.cursor:])
            self.cursor -= 1
        elif key == KeyCode.DELETE and self.cursor < len(self.value):
            self._set_value(self.value[:self.cursor] + self.value[self.cursor + 1:])
        elif key == KeyCode.LEFT and self.cursor > 0:
            self.cursor -= 1
        elif key == KeyCode.RIGHT and self.cursor < len(self.value):
            self.cursor += 1
        elif key == KeyCode.HOME:
            self.cursor = 0
        elif key == KeyCode.END:
            self.cursor = len(self.value)
        elif key == KeyCode.ENTER and self.on_submit:
            self.on_submit(self.value)

    # Text manipulation

    def insert_text(self, text: str) -> None:
        """Insert at the cursor, truncated to the remaining capacity."""
        available = self.max_length - len(self.value)
        if not text or available <= 0:
            return

        to_insert = text[:available]
        self._set_value(self.value[:self.cursor] + to_insert + self.value[self.cursor:])
        self.cursor += len(to_insert)

    def _set_value(self, value: str) -> None:
        self.value = value
        if self.on_change:
            self.on_change(value)

    # Drawing

    def draw(self, ui: 'InterfaceDrawer') -> None:
        ui.draw_rect(0, 0, self.rect.width, self.rect.height, WHITE if self.focused else LIGHT_GRAY)
        ui.draw_box(0, 0, self.rect.width, self.rect.height, DARK_BLUE if self.focused else BLACK)

        if self.value:
            ui.draw_text(self.value, self.TEXT_X, self.TEXT_Y, BLACK)

        if self.focused:
            cursor_x = self.TEXT_X + ui.text_width(self.value[:self.cursor])
            ui.draw_rect(cursor_x, self.TEXT_Y - 1, 1, self.CURSOR_HEIGHT, BLACK)
