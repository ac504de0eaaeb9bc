"""
Prompt service: yes/no questions answered through a ConfirmModal.

Usage:
    future = manager.prompts.confirm("Discard changes?")
    future.add_done_callback(lambda f: f.result() and discard())
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING

from rivet.ui.widgets.confirm_modal import ConfirmModal, ConfirmModalOptions

if TYPE_CHECKING:
    from rivet.ui.manager import Manager

logger = logging.getLogger(__name__)


class PromptService:
    """One prompt at a time; a second request while a modal is up fails."""

    def __init__(self, manager: 'Manager'):
        self.manager = manager

    def confirm(self, message: str) -> 'Future[bool]':
        """
        Ask the user to confirm.

        The modal takes focus while open. When it closes, focus returns to
        whatever had it before, and only then does the future resolve.

        Raises:
            RuntimeError: If a modal is already active
        """
        manager = self.manager
        if manager.modal_widget is not None:
            raise RuntimeError("Cannot show confirm modal while another modal is active")

        previous_focus = manager.focused_widget
        modal = ConfirmModal(manager, ConfirmModalOptions(title="Confirm", message=message))

        outcome: Future = Future()
        outcome.set_running_or_notify_cancel()

        def on_resolved(modal_future: Future) -> None:
            if previous_focus is not None and previous_focus is not modal:
                manager.request_focus(previous_focus)
            elif manager.focused_widget is modal:
                manager.release_focus(modal)

            confirmed = modal_future.result().confirmed
            logger.info("Confirm %r answered %s", message, "yes" if confirmed else "no")
            outcome.set_result(confirmed)

        modal.show().add_done_callback(on_resolved)
        manager.request_focus(modal)
        return outcome
