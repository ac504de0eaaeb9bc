"""
Session: one running desktop.

Owns the framebuffer, the drawer, the system log and the Manager of the
current application. Hosts (the pygame Desktop, the HeadlessRivet harness)
feed input through emit_event and call draw once per frame.

Usage:
    with Session(font, RivetConfig()) as session:
        session.launch("calculator")
        session.emit_event(MouseEvent(MouseAction.DOWN, Point(10, 10)))
        session.draw()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from rivet.core.config import RivetConfig
from rivet.core.log import SystemLog, SystemLogHandler
from rivet.graphics.drawer import InterfaceDrawer
from rivet.graphics.surface import Surface
from rivet.runtime.context import SystemContext
from rivet.ui.manager import Manager

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.core.rect import Point
    from rivet.graphics.font import BinaryFont
    from rivet.runtime.context import Application, ApplicationFactory

logger = logging.getLogger(__name__)

# Logger whose records feed the system log
ROOT_LOGGER_NAME = "rivet"


class Session:
    """
    One desktop session.

    Applications never replace themselves directly: launch() only records
    the request while an event is being dispatched, and the switch happens
    once that event has been fully routed.
    """

    def __init__(self, font: 'BinaryFont', config: Optional[RivetConfig] = None):
        self.config = config or RivetConfig()
        self.font = font

        # Framebuffer shared by the plain screen and the drawer
        self.screen = Surface(self.config.width, self.config.height)
        self.drawer = InterfaceDrawer(
            font, self.config.width, self.config.height, pixels=self.screen.pixels
        )

        self.log = SystemLog(self.config.log_retention)
        self._log_handler = SystemLogHandler(self.log, self.config.log_level)
        logging.getLogger(ROOT_LOGGER_NAME).addHandler(self._log_handler)

        self.manager = Manager(self.drawer, self.config, self.log)
        self.application: Optional[Application] = None
        self.application_name: Optional[str] = None

        self._dispatching = False
        self._pending_launch: Optional[str] = None

    # Applications

    def _context(self) -> SystemContext:
        return SystemContext(
            screen=self.screen,
            drawer=self.drawer,
            font=self.font,
            screen_width=self.config.width,
            screen_height=self.config.height,
            manager=self.manager,
            launch=self.launch,
        )

    def start(self, factory: 'ApplicationFactory', name: str = "") -> 'Application':
        """Run factory against a fresh Manager and make it the current application."""
        self.manager = Manager(self.drawer, self.config, self.log)
        self.application = factory(self._context())
        self.application_name = name or self.application.name or None
        logger.info("Started application %s", self.application_name or "<anonymous>")
        return self.application

    def launch(self, name: str) -> None:
        """
        Switch to a registered application.

        Raises:
            KeyError: If no application is registered under name
        """
        from rivet.apps import get_application

        # Fail fast on unknown names, even when deferred
        get_application(name)

        if self._dispatching:
            self._pending_launch = name
            return
        self.start(get_application(name), name)

    def _apply_pending_launch(self) -> None:
        name = self._pending_launch
        self._pending_launch = None
        if name is not None:
            self.launch(name)

    # Input

    def emit_event(self, event: 'WidgetEvent') -> None:
        """Route an event through the current Manager."""
        self._dispatching = True
        try:
            self.manager.emit_event(event)
        finally:
            self._dispatching = False
        self._apply_pending_launch()

    # Drawing

    def draw(
        self,
        mouse_location: Optional['Point'] = None,
        mouse_down_location: Optional['Point'] = None,
    ) -> None:
        """Render the application frame, then the active modal on top."""
        if mouse_location is None:
            mouse_location = self.manager.mouse_location

        if self.application is not None:
            self.application.draw(mouse_location, mouse_down_location)

        modal = self.manager.modal_widget
        if modal is not None:
            modal.delegate_draw(self.drawer)

    # Lifecycle

    def close(self) -> None:
        """Detach the system log handler."""
        logging.getLogger(ROOT_LOGGER_NAME).removeHandler(self._log_handler)

    def __enter__(self) -> 'Session':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
