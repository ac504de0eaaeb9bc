"""
Core module.

Exports:
- Point, Size, Rect and geometry helpers
- Widget event types and key codes
- RivetConfig: runtime configuration
- SystemLog, SystemLogHandler: in-memory log ring
"""

from rivet.core.rect import (
    Point,
    Size,
    Rect,
    ORIGIN,
    is_in_rect,
    is_rect_contained,
    rect_intersects,
    normalize_rect,
    center_horizontally,
    center_vertically,
    center_rect,
)
from rivet.core.events import (
    EventType,
    KeyAction,
    FocusChange,
    MouseAction,
    KeyCode,
    KeyEvent,
    TypedEvent,
    FocusEvent,
    MouseEvent,
    WidgetEvent,
)
from rivet.core.config import RivetConfig
from rivet.core.log import SystemLog, SystemLogHandler, LOG_RETENTION_DEFAULT

__all__ = [
    # Geometry
    "Point",
    "Size",
    "Rect",
    "ORIGIN",
    "is_in_rect",
    "is_rect_contained",
    "rect_intersects",
    "normalize_rect",
    "center_horizontally",
    "center_vertically",
    "center_rect",
    # Events
    "EventType",
    "KeyAction",
    "FocusChange",
    "MouseAction",
    "KeyCode",
    "KeyEvent",
    "TypedEvent",
    "FocusEvent",
    "MouseEvent",
    "WidgetEvent",
    # Config
    "RivetConfig",
    # Log
    "SystemLog",
    "SystemLogHandler",
    "LOG_RETENTION_DEFAULT",
]
