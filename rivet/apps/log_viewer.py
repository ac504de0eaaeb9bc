"""
Log viewer: shows the tail of the system log.

Entries typed into the input line are appended on Enter or with the
"Add Log Entry" button; an empty line adds a generated sample entry.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import TYPE_CHECKING

from rivet.apps.window import AppWindow, desktop_application
from rivet.core.rect import Point
from rivet.graphics.palette import BLACK, DARK_GRAY, LIGHT_GRAY, RED
from rivet.ui.widgets.button import TextButton
from rivet.ui.widgets.text_input import TextInput

if TYPE_CHECKING:
    from rivet.graphics.drawer import InterfaceDrawer
    from rivet.runtime.context import Application, SystemContext
    from rivet.ui.manager import Manager

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."
EMPTY_MESSAGE = 'No log entries yet. Click "Add Log Entry" to generate one.'


def draw_text_with_ellipsis(
    ui: 'InterfaceDrawer',
    text: str,
    x: float,
    y: float,
    max_width: float,
    color: int = BLACK,
) -> None:
    """Draw text, replacing the overflow with a trailing marker."""
    truncated = ui.truncate_text_to_width(text, max_width)
    if truncated == text:
        ui.draw_text(text, x, y, color)
        return

    marker_width = ui.text_width(TRUNCATION_MARKER)
    if max_width <= marker_width:
        ui.draw_text(truncated, x, y, color)
        return

    shortened = ui.truncate_text_to_width(text, max_width - marker_width)
    ui.draw_text_clamped(shortened + TRUNCATION_MARKER, x, y, max_width, color)


class LogViewerWindow(AppWindow):
    kind = "log_viewer"

    TITLE = "System Log Viewer"
    WIDTH = 220
    HEIGHT = 150

    PANEL_X = 6
    PANEL_Y = 26
    INPUT_MAX_LENGTH = 80

    def __init__(self, manager: 'Manager'):
        super().__init__(manager)
        self.log_counter = 1

        self.panel_width = self.WIDTH - 12
        self.panel_height = self.HEIGHT - 84

        self.entry_input = TextInput(
            manager,
            Point(self.PANEL_X, self.PANEL_Y + self.panel_height + 4),
            self.panel_width,
            self.INPUT_MAX_LENGTH,
        )
        self.entry_input.on_submit = lambda value: self.add_log()

        button_y = self.HEIGHT - 28
        self.add_log_button = TextButton(manager, Point(0, button_y), "Add Log Entry", self.add_log)
        self.add_log_button.rect.x = 10

        self.clear_log_button = TextButton(manager, Point(0, button_y), "Clear Logs", self.clear_logs)
        self.clear_log_button.rect.x = self.WIDTH - self.clear_log_button.rect.width - 10

        self.add_widget(self.entry_input)
        self.add_widget(self.add_log_button)
        self.add_widget(self.clear_log_button)

    def add_log(self) -> None:
        text = self.entry_input.value.strip()
        if text:
            self.manager.log.write(text)
            self.entry_input.value = ""
            self.entry_input.cursor = 0
        else:
            timestamp = datetime.now().isoformat(timespec="seconds")
            self.manager.log.write(
                f"{timestamp} - This is a sample log entry with random ID "
                f"{random.randint(0, 9999)} to demonstrate text wrapping and "
                f"clamping behavior #{self.log_counter}"
            )
        self.log_counter += 1

    def clear_logs(self) -> None:
        self.manager.log.clear()
        self.log_counter = 1
        logger.debug("System log cleared")

    def draw(self, ui: 'InterfaceDrawer') -> None:
        super().draw(ui)

        panel_x, panel_y = self.PANEL_X, self.PANEL_Y
        ui.draw_panel(panel_x, panel_y, self.panel_width, self.panel_height, LIGHT_GRAY)

        # Edge markers above the panel and the text region
        marker_y = panel_y - 3
        ui.draw_rect(panel_x, marker_y, 1, 2, RED)
        ui.draw_rect(panel_x + self.panel_width - 1, marker_y, 1, 2, RED)

        content_x = panel_x + 4
        content_y = panel_y + 4
        content_width = self.panel_width - 8
        content_height = self.panel_height - 8
        line_height = ui.font_height + 2
        max_lines = max(1, content_height // line_height)

        ui.draw_rect(content_x, content_y - 2, 1, 2, RED)
        ui.draw_rect(content_x + content_width - 1, content_y - 2, 1, 2, RED)

        logs = self.manager.log.read()
        if not logs:
            ui.draw_text_clamped(EMPTY_MESSAGE, content_x, content_y, content_width, DARK_GRAY)
            return

        visible = logs[-max_lines:]
        start_index = len(logs) - len(visible)
        for i, line in enumerate(visible):
            entry = f"{start_index + i + 1:03d}: {line}"
            draw_text_with_ellipsis(ui, entry, content_x, content_y + i * line_height, content_width)


def log_viewer_application(context: 'SystemContext') -> 'Application':
    return desktop_application(context, LogViewerWindow(context.manager), "logviewer")
