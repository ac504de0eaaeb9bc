"""
Calculator: four-function calculator built from plain buttons.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Optional

from rivet.apps.window import AppWindow, desktop_application
from rivet.core.rect import Point, Rect
from rivet.graphics.palette import BLACK, MEDIUM_GRAY
from rivet.ui.base_widget import BaseWidget
from rivet.ui.widgets.button import Button

if TYPE_CHECKING:
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.runtime.context import Application, SystemContext
    from rivet.ui.manager import Manager


def format_number(value: float) -> str:
    """Integral values print without a fractional part."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


class Display(BaseWidget):
    """Sunken panel showing the current value, right-aligned."""

    kind = "calculator_display"

    WIDTH = 150
    HEIGHT = 30
    PADDING = 5

    def __init__(self, manager: 'Manager', location: Point, text: Callable[[], str]):
        super().__init__(manager, Rect(location.x, location.y, self.WIDTH, self.HEIGHT))
        self.text = text

    def draw(self, ui: 'InterfaceDrawer') -> None:
        ui.draw_panel(0, 0, self.rect.width, self.rect.height, MEDIUM_GRAY)

        text = self.text()
        text_x = max(self.PADDING, self.rect.width - ui.text_width(text) - self.PADDING)
        text_y = self.rect.height / 2 - 3
        ui.draw_text(text, text_x, text_y, BLACK)


class CalculatorButton(Button):
    """Button with a centred label."""

    kind = "calculator_button"

    def __init__(
        self,
        manager: 'Manager',
        location: Point,
        width: float,
        height: float,
        label: str,
        on_click: Callable[[], None],
    ):
        super().__init__(manager, Rect(location.x, location.y, width, height), on_click)
        self.label = label

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)
        text_x = math.floor((self.rect.width - ui.text_width(self.label)) / 2)
        text_y = math.floor((self.rect.height - 8) / 2) + 1
        ui.draw_text(self.label, text_x, text_y, BLACK)


class CalculatorWindow(AppWindow):
    kind = "calculator"

    TITLE = "Calculator"
    WIDTH = 180
    HEIGHT = 160

    BUTTON_WIDTH = 35
    BUTTON_HEIGHT = 18
    BUTTON_SPACING = 2
    GRID_X = 10
    GRID_Y = 58
    GRID_COLS = 4

    LAYOUT = (
        "7", "8", "9", "/",
        "4", "5", "6", "*",
        "1", "2", "3", "-",
        "0", ".", "=", "+",
    )

    def __init__(self, manager: 'Manager'):
        super().__init__(manager)

        self.current_value = 0.0
        self.display_value = "0"
        self.operation: Optional[str] = None
        self.new_number = True

        self.add_widget(Display(manager, Point(10, 25), lambda: self.display_value))

        for i, label in enumerate(self.LAYOUT):
            col = i % self.GRID_COLS
            row = i // self.GRID_COLS
            location = Point(
                self.GRID_X + col * (self.BUTTON_WIDTH + self.BUTTON_SPACING),
                self.GRID_Y + row * (self.BUTTON_HEIGHT + self.BUTTON_SPACING),
            )
            self.add_widget(CalculatorButton(
                manager, location, self.BUTTON_WIDTH, self.BUTTON_HEIGHT,
                label, self._handler_for(label),
            ))

        rows = len(self.LAYOUT) // self.GRID_COLS
        self.add_widget(CalculatorButton(
            manager,
            Point(self.GRID_X, self.GRID_Y + rows * (self.BUTTON_HEIGHT + self.BUTTON_SPACING) + 2),
            self.WIDTH - 20,
            self.BUTTON_HEIGHT,
            "Clear",
            self.clear,
        ))

    def _handler_for(self, label: str) -> Callable[[], None]:
        if label.isdigit():
            return lambda: self.number_pressed(label)
        if label == ".":
            return self.decimal_pressed
        if label == "=":
            return self.equals_pressed
        return lambda: self.operation_pressed(label)

    # Arithmetic

    def number_pressed(self, digit: str) -> None:
        if self.new_number:
            self.display_value = digit
            self.new_number = False
        else:
            self.display_value += digit

    def decimal_pressed(self) -> None:
        if self.new_number:
            self.display_value = "0."
            self.new_number = False
        elif "." not in self.display_value:
            self.display_value += "."

    def operation_pressed(self, op: str) -> None:
        value = float(self.display_value)
        if self.operation is not None:
            self.current_value = self._calculate(self.current_value, value, self.operation)
        else:
            self.current_value = value

        self.operation = op
        self.new_number = True
        self.display_value = format_number(self.current_value)

    def equals_pressed(self) -> None:
        if self.operation is None:
            return

        value = float(self.display_value)
        self.current_value = self._calculate(self.current_value, value, self.operation)
        self.display_value = format_number(self.current_value)
        self.operation = None
        self.new_number = True

    @staticmethod
    def _calculate(a: float, b: float, op: str) -> float:
        if op == "+":
            return a + b
        if op == "-":
            return a - b
        if op == "*":
            return a * b
        if op == "/":
            return a / b if b != 0 else 0.0
        return a

    def clear(self) -> None:
        self.current_value = 0.0
        self.display_value = "0"
        self.operation = None
        self.new_number = True


def calculator_application(context: 'SystemContext') -> 'Application':
    return desktop_application(context, CalculatorWindow(context.manager), "calculator")
