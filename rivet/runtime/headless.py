"""
Headless Rivet: run the desktop without a window.

Injects synthetic input and exposes state for tests and automation.

Usage:
    rivet = HeadlessRivet("about", blank_font())
    rivet.click(160, 160)
    assert rivet.manager.modal_widget is not None
    rivet.save_screenshot("about.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import numpy as np
import pygame

from rivet.core.config import RivetConfig
from rivet.core.events import (
    KeyAction,
    KeyEvent,
    MouseAction,
    MouseEvent,
    TypedEvent,
)
from rivet.core.rect import Point, Size
from rivet.runtime.session import Session

if TYPE_CHECKING:
    from rivet.graphics.font import BinaryFont
    from rivet.runtime.context import ApplicationFactory
    from rivet.ui.manager import Manager

logger = logging.getLogger(__name__)


class HeadlessRivet:
    """
    Windowless session with synthetic event injection.

    Mouse down/up redraw the frame, as the interactive host does.
    """

    def __init__(
        self,
        application: Union['ApplicationFactory', str],
        font: 'BinaryFont',
        config: Optional[RivetConfig] = None,
    ):
        self.session = Session(font, config)
        if isinstance(application, str):
            self.session.launch(application)
        else:
            self.session.start(application)

        self._mouse_location = Point(0, 0)
        self._mouse_down_location: Optional[Point] = None

    # Inspection

    @property
    def manager(self) -> 'Manager':
        """Manager of the current application (replaced on launch)."""
        return self.session.manager

    def get_manager(self) -> 'Manager':
        return self.session.manager

    @property
    def mouse_location(self) -> Point:
        return self._mouse_location

    @property
    def screen_size(self) -> Size:
        return self.session.config.screen_size

    def get_logs(self) -> list[str]:
        return self.session.log.read()

    # Drawing

    def draw(self) -> None:
        self.session.draw(self._mouse_location, self._mouse_down_location)

    def screenshot(self) -> np.ndarray:
        """Draw and return the frame as a (height, width, 3) RGB array."""
        self.draw()
        return self.session.screen.to_rgb()

    def save_screenshot(self, path: Union[str, Path]) -> None:
        """Save the current frame as an image file (format from the suffix)."""
        rgb = self.screenshot()
        image = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        pygame.image.save(image, str(path))
        logger.debug("Saved screenshot to %s", path)

    # Mouse

    def mouse_move(self, x: float, y: float) -> None:
        previous = self._mouse_location
        self._mouse_location = Point(x, y)
        self.session.emit_event(
            MouseEvent(MouseAction.MOVE, self._mouse_location, previous_location=previous)
        )

    def mouse_down(self, x: float, y: float, button: int = 0) -> None:
        self._mouse_location = Point(x, y)
        self._mouse_down_location = Point(x, y)
        self.session.emit_event(MouseEvent(MouseAction.DOWN, self._mouse_location, button))
        self.draw()

    def mouse_up(self, x: float, y: float, button: int = 0) -> None:
        self._mouse_location = Point(x, y)
        self.session.emit_event(MouseEvent(MouseAction.UP, Point(x, y), button))
        self._mouse_down_location = None
        self.draw()

    def click(self, x: float, y: float, button: int = 0) -> None:
        self.mouse_down(x, y, button)
        self.mouse_up(x, y, button)

    def drag(
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        steps: int = 10,
    ) -> None:
        """Press at start, move in evenly spaced steps, release at end."""
        self.mouse_down(start_x, start_y)
        for i in range(1, steps + 1):
            t = i / steps
            x = round(start_x + (end_x - start_x) * t)
            y = round(start_y + (end_y - start_y) * t)
            self.mouse_move(x, y)
        self.mouse_up(end_x, end_y)

    # Keyboard

    def key_down(self, key: int) -> None:
        self.session.emit_event(KeyEvent(key, KeyAction.DOWN))

    def key_up(self, key: int) -> None:
        self.session.emit_event(KeyEvent(key, KeyAction.UP))

    def type_char(self, char: str) -> None:
        """Send the first character of char as typed text."""
        if not char:
            return
        self.session.emit_event(TypedEvent(char[0]))

    def type_text(self, text: str) -> None:
        for char in text:
            self.type_char(char)

    # Lifecycle

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'HeadlessRivet':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
