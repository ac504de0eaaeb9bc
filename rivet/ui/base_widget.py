"""
Base widget holding child widgets.

Provides:
- Rect normalization at construction
- Child attachment with containment and collision validation
- Draw delegation through the surface transform stack
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rivet.core.rect import Rect, is_rect_contained, normalize_rect, rect_intersects
from rivet.ui.widget import Widget

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.ui.manager import Manager


class BaseWidget(Widget):
    """
    Concrete widget with children.

    A widget's rect.x/y place it inside its parent, but everything inside
    the widget (its drawing commands and its children) stays in local
    coordinates relative to (0, 0) at the widget's top-left.
    """

    kind = "base"

    def __init__(self, manager: 'Manager', rect: Rect):
        self.manager = manager
        self.rect = normalize_rect(rect, manager.screen_size)
        self._children: list[Widget] = []

    @property
    def children(self) -> list[Widget]:
        return self._children

    # Child management

    def add_widget(self, child: Widget) -> 'BaseWidget':
        """
        Attach a child widget.

        Raises:
            ValueError: If the child extends outside this widget's local
                bounds or overlaps an existing child

        Returns:
            Self for chaining
        """
        local = self.rect.local()

        if not is_rect_contained(child.rect, local):
            overflows = []
            if child.rect.x < 0:
                overflows.append(f"left by {-child.rect.x}px")
            if child.rect.y < 0:
                overflows.append(f"top by {-child.rect.y}px")
            if child.rect.right > local.width:
                overflows.append(f"right by {child.rect.right - local.width}px")
            if child.rect.bottom > local.height:
                overflows.append(f"bottom by {child.rect.bottom - local.height}px")

            raise ValueError(
                "Child widget extends outside parent bounds:\n"
                f"  Child ({child.kind}): {child.rect.describe()}\n"
                f"  Parent ({self.kind}): {local.describe()}\n"
                f"  Overflow: {', '.join(overflows)}"
            )

        for existing in self._children:
            if rect_intersects(existing.rect, child.rect):
                raise ValueError(
                    "Widget collision detected:\n"
                    f"  New widget: {child.kind} ({child.rect.describe()})\n"
                    f"  Existing widget: {existing.kind} ({existing.rect.describe()})\n"
                    f"  Parent: {self.kind}"
                )

        self._children.append(child)
        return self

    # Events

    def delegate_event(self, event: 'WidgetEvent') -> None:
        self.handle_event(event)

    def handle_event(self, event: 'WidgetEvent') -> None:
        pass

    # Drawing

    def draw(self, ui: 'InterfaceDrawer') -> None:
        pass

    def delegate_draw(self, ui: 'InterfaceDrawer') -> None:
        with ui.transform(self.rect.x, self.rect.y):
            self.draw(ui)
            for child in self._children:
                child.delegate_draw(ui)
