"""
Widget capability contract.

A widget is a node in the UI tree: it has a rect in its parent's
coordinate space, ordered children, reacts to events already translated
into its own space, and draws itself in local coordinates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from rivet.core.events import WidgetEvent
    from rivet.core.rect import Rect
    from rivet.graphics.drawer import InterfaceDrawer


class Widget(ABC):
    """
    Abstract widget.

    Children are kept in insertion order, which is both the draw order and
    the hit-test priority order.
    """

    # Diagnostic label only; never used for dispatch
    kind: ClassVar[str] = "widget"

    rect: 'Rect'

    @property
    @abstractmethod
    def children(self) -> list['Widget']:
        """Ordered child widgets."""

    @abstractmethod
    def handle_event(self, event: 'WidgetEvent') -> None:
        """
        React to an event.

        Pointer locations are already in this widget's local space.
        """

    @abstractmethod
    def delegate_event(self, event: 'WidgetEvent') -> None:
        """Entry point for events pushed into the widget by its owner."""

    @abstractmethod
    def draw(self, ui: 'InterfaceDrawer') -> None:
        """Draw this widget only, in local coordinates."""

    @abstractmethod
    def delegate_draw(self, ui: 'InterfaceDrawer') -> None:
        """Draw this widget and its subtree at the right screen position."""

    def __repr__(self) -> str:
        rect = self.rect
        return f"{self.kind}(pos=({rect.x}, {rect.y}), size=({rect.width}, {rect.height}))"
