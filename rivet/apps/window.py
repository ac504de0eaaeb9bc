"""
Shared application chrome: a centred window with a title bar on the
teal desktop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rivet.core.rect import ORIGIN, Rect, Size, center_rect
from rivet.graphics.palette import DARK_BLUE, TEAL, WHITE
from rivet.runtime.context import Application
from rivet.ui.base_widget import BaseWidget

if TYPE_CHECKING:
    from rivet.core.rect import Point
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.runtime.context import SystemContext
    from rivet.ui.manager import Manager


class AppWindow(BaseWidget):
    """
    Application root widget.

    Starts out covering the screen, then shrinks to WIDTH x HEIGHT centred
    on it. Children are laid out relative to the window.
    """

    kind = "app_window"

    TITLE = ""
    WIDTH = 180
    HEIGHT = 160

    TITLE_BAR_X = 3
    TITLE_BAR_Y = 3
    TITLE_BAR_HEIGHT = 14

    def __init__(self, manager: 'Manager'):
        screen = manager.screen_size
        super().__init__(manager, Rect(ORIGIN.x, ORIGIN.y, screen.width, screen.height))

        location = center_rect(Size(self.WIDTH, self.HEIGHT), self.rect)
        self.rect = Rect(location.x, location.y, self.WIDTH, self.HEIGHT)

    def draw(self, ui: 'InterfaceDrawer') -> None:
        ui.draw_window(0, 0, self.rect.width, self.rect.height)
        ui.draw_rect(
            self.TITLE_BAR_X,
            self.TITLE_BAR_Y,
            self.rect.width - 2 * self.TITLE_BAR_X,
            self.TITLE_BAR_HEIGHT,
            DARK_BLUE,
        )
        ui.draw_text(self.TITLE, self.TITLE_BAR_X + 4, self.TITLE_BAR_Y + 3, WHITE, bold=True)


def desktop_application(context: 'SystemContext', window: BaseWidget, name: str) -> Application:
    """Install window as the application root and draw it over the desktop."""
    context.manager.set_application_widget(window)

    def draw(mouse_location: 'Point', mouse_down_location: Optional['Point'] = None) -> None:
        context.screen.draw_rect(0, 0, context.screen_width, context.screen_height, TEAL)
        window.delegate_draw(context.drawer)

    return Application(draw, name)
