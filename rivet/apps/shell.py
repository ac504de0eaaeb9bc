"""
Shell: launcher window with one icon button per application.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from rivet.apps.window import AppWindow, desktop_application
from rivet.core.rect import Rect
from rivet.graphics.palette import BLACK, DARK_BLUE, DARK_GRAY
from rivet.ui.widgets.button import Button

if TYPE_CHECKING:
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.runtime.context import Application, SystemContext
    from rivet.ui.manager import Manager


@dataclass(frozen=True)
class AppInfo:
    name: str
    key: str
    description: str
    icon: str


SHELL_APPS = (
    AppInfo("Calculator", "calculator", "Simple calculator demo", "C"),
    AppInfo("About", "about", "About RetroOS", "A"),
    AppInfo("Log Viewer", "logviewer", "Inspect logs", "L"),
)


class AppButton(Button):
    """Icon tile with the application name underneath."""

    kind = "app_button"

    def __init__(
        self,
        manager: 'Manager',
        rect: Rect,
        app: AppInfo,
        button_size: int,
        on_click: Callable[[], None],
    ):
        super().__init__(manager, rect, on_click)
        self.app = app
        self.button_size = button_size

    def draw(self, ui: 'InterfaceDrawer') -> None:
        ui.draw_panel(0, 0, self.button_size, self.button_size)

        icon_x = math.floor(self.button_size / 2) - 4
        icon_y = math.floor(self.button_size / 2) - 4
        ui.draw_text(self.app.icon, icon_x, icon_y, DARK_BLUE, bold=True)

        name_width = ui.text_width(self.app.name)
        name_x = math.floor((self.button_size - name_width) / 2)
        # Label sits in the bottom rows of the tile
        ui.draw_text(self.app.name, name_x, self.rect.height - ui.font_height, BLACK)


class ShellWindow(AppWindow):
    """3x3 launcher grid."""

    kind = "shell"

    TITLE = "RetroOS Shell"
    INSTRUCTIONS = "Click an application to launch it"
    WIDTH = 180
    HEIGHT = 160

    GRID_COLS = 3
    GRID_ROWS = 3
    BUTTON_SIZE = 20
    HORIZONTAL_SPACING = 30
    VERTICAL_SPACING = 10
    LABEL_HEIGHT = 8
    LABEL_SPACING = 2
    CONTENT_START_Y = 20

    def __init__(self, manager: 'Manager', launch: Callable[[str], None]):
        super().__init__(manager)
        self.launch = launch
        self._create_app_buttons()

    @property
    def total_button_height(self) -> int:
        return self.BUTTON_SIZE + self.LABEL_SPACING + self.LABEL_HEIGHT

    def _create_app_buttons(self) -> None:
        content_height = self.HEIGHT - 40
        grid_width = self.GRID_COLS * (self.BUTTON_SIZE + self.HORIZONTAL_SPACING) - self.HORIZONTAL_SPACING
        grid_height = self.GRID_ROWS * (self.total_button_height + self.VERTICAL_SPACING) - self.VERTICAL_SPACING

        start_x = (self.WIDTH - grid_width) / 2
        start_y = self.CONTENT_START_Y + (content_height - grid_height) / 2

        for i, app in enumerate(SHELL_APPS[:self.GRID_COLS * self.GRID_ROWS]):
            col = i % self.GRID_COLS
            row = i // self.GRID_COLS
            rect = Rect(
                start_x + col * (self.BUTTON_SIZE + self.HORIZONTAL_SPACING),
                start_y + row * (self.total_button_height + self.VERTICAL_SPACING),
                self.BUTTON_SIZE,
                self.total_button_height,
            )
            self.add_widget(
                AppButton(self.manager, rect, app, self.BUTTON_SIZE, self._launcher(app.key))
            )

    def _launcher(self, key: str) -> Callable[[], None]:
        return lambda: self.launch(key)

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)

        instructions_width = ui.text_width(self.INSTRUCTIONS)
        instructions_x = math.floor((self.WIDTH - instructions_width) / 2)
        ui.draw_text(self.INSTRUCTIONS, instructions_x, self.HEIGHT - 15, DARK_GRAY)


def shell_application(context: 'SystemContext') -> 'Application':
    window = ShellWindow(context.manager, context.launch)
    return desktop_application(context, window, "shell")
