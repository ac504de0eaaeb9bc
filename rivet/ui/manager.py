"""
UI Manager - central hub for input routing.

Owns the widget tree roots (application widget, optional modal widget),
mouse state, the focused widget and the captured widget. Every input event
enters through emit_event and is routed by capture, modal exclusivity and
hit-testing, in that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from rivet.core.config import RivetConfig
from rivet.core.events import (
    EventType,
    FocusChange,
    FocusEvent,
    MouseAction,
    MouseEvent,
)
from rivet.core.log import SystemLog
from rivet.core.rect import Point, Size, is_in_rect
from rivet.ui.prompts import PromptService

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.ui.widget import Widget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HitResult:
    """Deepest widget under a point, with the point in that widget's space."""
    widget: 'Widget'
    local_point: Point
    offset: Point


class Manager:
    """
    Focus, capture and modal manager.

    Responsibilities:
    - Pointer routing (capture redirect, modal exclusivity, hit-testing)
    - Keyboard routing to the focused widget
    - Focus transitions (lose before gain)
    - Mouse capture lifecycle (always released on mouse-up)
    - Single modal overlay
    """

    def __init__(
        self,
        ui: 'InterfaceDrawer',
        config: Optional[RivetConfig] = None,
        log: Optional[SystemLog] = None,
    ):
        self.config = config or RivetConfig()
        self.ui = ui
        self.log = log or SystemLog(self.config.log_retention)
        self.prompts = PromptService(self)

        # Roots
        self._application_widget: Optional[Widget] = None
        self._modal_widget: Optional[Widget] = None

        # Routing state
        self._captured_widget: Optional[Widget] = None
        self._captured_widget_offset = Point(0, 0)
        self._focused_widget: Optional[Widget] = None

        # Mouse state
        center = Point(self.config.width / 2, self.config.height / 2)
        self._mouse_location = center
        self._previous_mouse_location = center
        self._mouse_pressed = False

    # State

    @property
    def screen_size(self) -> Size:
        return self.config.screen_size

    @property
    def mouse_pressed(self) -> bool:
        return self._mouse_pressed

    @property
    def mouse_location(self) -> Point:
        return self._mouse_location

    @property
    def previous_mouse_location(self) -> Point:
        return self._previous_mouse_location

    @property
    def application_widget(self) -> Optional['Widget']:
        return self._application_widget

    @property
    def modal_widget(self) -> Optional['Widget']:
        return self._modal_widget

    @property
    def focused_widget(self) -> Optional['Widget']:
        return self._focused_widget

    @property
    def captured_widget(self) -> Optional['Widget']:
        return self._captured_widget

    @property
    def root_widget(self) -> Optional['Widget']:
        """Root for pointer routing: the modal if one is active."""
        if self._modal_widget is not None:
            return self._modal_widget
        return self._application_widget

    def set_application_widget(self, widget: 'Widget') -> None:
        self._application_widget = widget

    # Tree lookup

    def _find_widget_offset(
        self,
        target: 'Widget',
        current: 'Widget',
        offset: Point,
    ) -> Optional[Point]:
        """Absolute offset of target, found by walking down from current."""
        if current is target:
            return offset

        for child in current.children:
            found = self._find_widget_offset(target, child, offset + child.rect.origin)
            if found is not None:
                return found

        return None

    def _hit_test(
        self,
        widget: 'Widget',
        point: Point,
        offset: Point,
    ) -> Optional[HitResult]:
        """Recursive hit test; children are tried before accepting widget itself."""
        local_point = point - offset
        if not is_in_rect(local_point, widget.rect.local()):
            return None

        for child in widget.children:
            hit = self._hit_test(child, point, offset + child.rect.origin)
            if hit is not None:
                return hit

        return HitResult(widget, local_point, offset)

    # Capture

    def request_capture(self, widget: 'Widget') -> None:
        """
        Route all pointer events to widget until the next mouse-up.

        Raises:
            RuntimeError: If there is no root widget
            ValueError: If widget is not attached under the active root
        """
        root = self.root_widget
        if root is None:
            raise RuntimeError("Cannot request capture: no root widget")

        offset = self._find_widget_offset(widget, root, root.rect.origin)
        if offset is None:
            raise ValueError(f"Cannot request capture: {widget!r} not found in tree")

        self._captured_widget = widget
        self._captured_widget_offset = offset

    def release_capture(self) -> None:
        self._captured_widget = None

    # Focus

    def request_focus(self, widget: 'Widget') -> None:
        """Give widget keyboard focus. Does nothing if it already has it."""
        if self._focused_widget is widget:
            return

        previous = self._focused_widget
        self._focused_widget = widget

        if previous is not None:
            previous.handle_event(FocusEvent(FocusChange.LOSE))
        widget.handle_event(FocusEvent(FocusChange.GAIN))

    def release_focus(self, widget: Optional['Widget'] = None) -> None:
        """
        Clear focus.

        Args:
            widget: Only release if this widget is the one focused
        """
        if self._focused_widget is None:
            return
        if widget is not None and widget is not self._focused_widget:
            return

        previous = self._focused_widget
        self._focused_widget = None
        previous.handle_event(FocusEvent(FocusChange.LOSE))

    # Modal

    def set_modal(self, widget: 'Widget') -> None:
        """
        Make widget the exclusive pointer root.

        Raises:
            RuntimeError: If another modal is already active
        """
        if self._modal_widget is not None and self._modal_widget is not widget:
            raise RuntimeError(
                f"Cannot set modal {widget!r}: {self._modal_widget!r} is already active"
            )
        self._modal_widget = widget

    def clear_modal(self) -> None:
        self._modal_widget = None

    # Input

    def _track_mouse(self, event: MouseEvent) -> None:
        if event.action is MouseAction.MOVE:
            self._previous_mouse_location = self._mouse_location
            self._mouse_location = event.location
        elif event.action is MouseAction.UP:
            self._mouse_pressed = False
            # Capture never outlives a button release
            self.release_capture()
        elif event.action is MouseAction.DOWN:
            self._mouse_pressed = True
            self._mouse_location = event.location
            logger.debug(
                "Mouse down at screen coords (%s, %s)",
                event.location.x, event.location.y,
            )

    def emit_event(self, event: 'WidgetEvent') -> None:
        """Route one input event to its target widget."""
        if event.type is not EventType.MOUSE:
            target = self._focused_widget
            if target is None:
                target = self._application_widget
            if target is not None:
                target.handle_event(event)
            return

        self._track_mouse(event)

        if self._captured_widget is not None:
            self._captured_widget.handle_event(event.translated(self._captured_widget_offset))
            return

        root = self.root_widget
        if root is None:
            return

        if self._modal_widget is not None and not is_in_rect(event.location, self._modal_widget.rect):
            # Outside the modal: swallow the event, drop focus, keep the modal
            self.release_focus()
            return

        hit = self._hit_test(root, event.location, root.rect.origin)
        if hit is not None:
            if event.action is MouseAction.DOWN:
                logger.debug(
                    "Hit test found %r at local coords (%s, %s)",
                    hit.widget, hit.local_point.x, hit.local_point.y,
                )
            hit.widget.handle_event(event.translated(hit.offset))
        elif event.action is MouseAction.DOWN:
            logger.debug(
                "Hit test found no widget at (%s, %s)",
                event.location.x, event.location.y,
            )
            self.release_focus()
