"""
Concrete widgets.
"""

from rivet.ui.widgets.button import Button, TextButton, FixedWidthTextButton
from rivet.ui.widgets.text_input import TextInput
from rivet.ui.widgets.confirm_modal import (
    ConfirmModal,
    ConfirmModalOptions,
    ConfirmResult,
    show_confirm_modal,
)

__all__ = [
    # Buttons
    "Button",
    "TextButton",
    "FixedWidthTextButton",
    # Input
    "TextInput",
    # Dialogs
    "ConfirmModal",
    "ConfirmModalOptions",
    "ConfirmResult",
    "show_confirm_modal",
]
