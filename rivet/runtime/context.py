"""
Application boundary.

An application factory receives a SystemContext and returns an
Application whose draw callback renders one frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from rivet.core.rect import Point
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.graphics.font import BinaryFont
    from rivet.graphics.surface import Surface
    from rivet.ui.manager import Manager


@dataclass
class SystemContext:
    """Everything an application may touch while it runs."""
    screen: 'Surface'
    drawer: 'InterfaceDrawer'
    font: 'BinaryFont'
    screen_width: int
    screen_height: int
    manager: 'Manager'
    launch: Callable[[str], None]


DrawCallback = Callable[['Point', Optional['Point']], None]


@dataclass
class Application:
    """A running application: its root widget and its frame renderer."""
    draw_frame: DrawCallback
    name: str = ""

    def draw(self, mouse_location: 'Point', mouse_down_location: Optional['Point'] = None) -> None:
        self.draw_frame(mouse_location, mouse_down_location)


ApplicationFactory = Callable[[SystemContext], Application]
