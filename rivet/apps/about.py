"""
About box. OK asks for confirmation, then returns to the shell.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Callable

from rivet.apps.window import AppWindow, desktop_application
from rivet.core.rect import Point, center_horizontally
from rivet.graphics.palette import BLACK, DARK_GRAY, LIGHT_GRAY, WHITE
from rivet.ui.widgets.button import TextButton

if TYPE_CHECKING:
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.runtime.context import Application, SystemContext
    from rivet.ui.manager import Manager

ABOUT_TEXT = "RetroOS\n(c) 1987 RetroSoft\nVersion 1.1.3\n"


class AboutWindow(AppWindow):
    kind = "about"

    TITLE = "About RetroOS"
    WIDTH = 180
    HEIGHT = 100

    LOGO_X = 12
    LOGO_Y = 30

    def __init__(self, manager: 'Manager', launch: Callable[[str], None]):
        super().__init__(manager)
        self.launch = launch

        self.ok_button = TextButton(manager, Point(0, self.HEIGHT - 30), "OK", self._on_ok)
        self.ok_button.rect.x = center_horizontally(self.ok_button.rect, self.rect.local())
        self.add_widget(self.ok_button)

    def _on_ok(self) -> None:
        self.manager.prompts.confirm("Are you sure?").add_done_callback(self._on_answer)

    def _on_answer(self, answer: 'Future[bool]') -> None:
        if answer.result():
            self.launch("shell")

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)

        x, y = self.LOGO_X, self.LOGO_Y
        ui.draw_panel(x, y, 24, 24, LIGHT_GRAY)
        ui.draw_dithered_rect(x + 2, y + 2, 20, 20, WHITE, LIGHT_GRAY)

        # Drop shadow under the letter
        ui.draw_text("R", x + 9, y + 8, DARK_GRAY)
        ui.draw_text("R", x + 8, y + 9, DARK_GRAY)
        ui.draw_text("R", x + 9, y + 9, DARK_GRAY)
        ui.draw_text("R", x + 8, y + 8, BLACK)

        ui.draw_text_block(ABOUT_TEXT, 44, 30, 2)


def about_application(context: 'SystemContext') -> 'Application':
    window = AboutWindow(context.manager, context.launch)
    return desktop_application(context, window, "about")
