"""
Confirmation dialog.

Usage:
    modal = ConfirmModal(manager, ConfirmModalOptions(message="Delete?"))
    future = modal.show()
    future.add_done_callback(lambda f: print(f.result().confirmed))
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import Future
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from rivet.core.events import EventType, KeyAction, KeyCode
from rivet.core.rect import Point, Rect
from rivet.ui.base_widget import BaseWidget
from rivet.ui.widgets.button import TextButton

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.ui.manager import Manager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmResult:
    confirmed: bool


@dataclass
class ConfirmModalOptions:
    title: str = "Confirm"
    message: str = "Are you sure?"
    confirm_text: str = "OK"
    cancel_text: str = "Cancel"
    on_confirm: Optional[Callable[[], None]] = None
    on_cancel: Optional[Callable[[], None]] = None


class ConfirmModal(BaseWidget):
    """
    Centred OK/Cancel window shown as the manager's modal.

    Children: the Cancel button (left) then the OK button (right).
    """

    kind = "confirm_modal"

    WIDTH = 100
    HEIGHT = 60
    BUTTON_MARGIN = 8
    BUTTON_BOTTOM_OFFSET = 22
    OK_BUTTON_WIDTH = 30

    def __init__(self, manager: 'Manager', options: Optional[ConfirmModalOptions] = None):
        screen = manager.screen_size
        x = math.floor((screen.width - self.WIDTH) / 2)
        y = math.floor((screen.height - self.HEIGHT) / 2)
        super().__init__(manager, Rect(x, y, self.WIDTH, self.HEIGHT))

        self.options = options or ConfirmModalOptions()
        self.result: Optional[ConfirmResult] = None
        self._future: Optional[Future] = None

        button_y = self.rect.height - self.BUTTON_BOTTOM_OFFSET
        self.cancel_button = TextButton(
            manager,
            Point(self.BUTTON_MARGIN, button_y),
            self.options.cancel_text,
            self.cancel,
        )
        self.ok_button = TextButton(
            manager,
            Point(self.rect.width - self.BUTTON_MARGIN - self.OK_BUTTON_WIDTH, button_y),
            self.options.confirm_text,
            self.confirm,
        )

        self.add_widget(self.cancel_button)
        self.add_widget(self.ok_button)

    @property
    def is_open(self) -> bool:
        return self._future is not None and self.result is None

    def show(self) -> 'Future[ConfirmResult]':
        """
        Install this modal and return a future for the user's answer.

        Raises:
            RuntimeError: If another modal is already active
        """
        if self.manager.modal_widget is not None:
            raise RuntimeError("Cannot show ConfirmModal while another modal is active")

        future: Future = Future()
        future.set_running_or_notify_cancel()
        self._future = future
        self.manager.set_modal(self)
        logger.debug("Showing confirm modal: %s", self.options.message)
        return future

    def confirm(self) -> None:
        self.result = ConfirmResult(confirmed=True)
        if self.options.on_confirm:
            self.options.on_confirm()
        self._dismiss()

    def cancel(self) -> None:
        self.result = ConfirmResult(confirmed=False)
        if self.options.on_cancel:
            self.options.on_cancel()
        self._dismiss()

    def _dismiss(self) -> None:
        # Clear first so done-callbacks may open another modal
        self.manager.clear_modal()
        if self._future is not None and not self._future.done():
            self._future.set_result(self.result)

    def handle_event(self, event: 'WidgetEvent') -> None:
        if event.type is not EventType.KEY or event.action is not KeyAction.DOWN:
            return
        if not self.is_open:
            return

        if event.key == KeyCode.ENTER:
            self.confirm()
        elif event.key == KeyCode.ESCAPE:
            self.cancel()

    def draw(self, ui: 'InterfaceDrawer') -> None:
        ui.draw_window(0, 0, self.rect.width, self.rect.height)

        if self.options.title:
            ui.draw_text(self.options.title, 8, 12)

        if self.options.message:
            ui.draw_text(self.options.message, 8, 28)


def show_confirm_modal(
    manager: 'Manager',
    options: Optional[ConfirmModalOptions] = None,
) -> 'Future[ConfirmResult]':
    """Build a ConfirmModal and show it."""
    return ConfirmModal(manager, options).show()
