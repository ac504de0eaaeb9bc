"""
UI module.

Exports:
- Widget, BaseWidget: the widget tree
- Manager: focus, capture and modal routing
- PromptService: confirmation prompts
- Concrete widgets (buttons, text input, confirm modal)
"""

from rivet.ui.widget import Widget
from rivet.ui.base_widget import BaseWidget
from rivet.ui.manager import Manager, HitResult
from rivet.ui.prompts import PromptService
from rivet.ui.widgets import (
    Button,
    TextButton,
    FixedWidthTextButton,
    TextInput,
    ConfirmModal,
    ConfirmModalOptions,
    ConfirmResult,
    show_confirm_modal,
)

__all__ = [
    # Tree
    "Widget",
    "BaseWidget",
    # Routing
    "Manager",
    "HitResult",
    "PromptService",
    # Widgets
    "Button",
    "TextButton",
    "FixedWidthTextButton",
    "TextInput",
    "ConfirmModal",
    "ConfirmModalOptions",
    "ConfirmResult",
    "show_confirm_modal",
]
