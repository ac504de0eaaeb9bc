"""
Desktop host: runs a Session in a pygame window.

The framebuffer is rendered at logical resolution and scaled up by the
configured scale factor. Window coordinates are divided by the same factor
before they reach the Manager.

Usage:
    config = RivetConfig(start_app="calculator", scale_factor=3)
    Desktop(config).run()
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import pygame

from rivet.core.config import RivetConfig
from rivet.core.events import (
    KeyAction,
    KeyCode,
    KeyEvent,
    MouseAction,
    MouseEvent,
    TypedEvent,
)
from rivet.core.rect import Point
from rivet.graphics.font import BinaryFont, load_font_file, rasterize_system_font
from rivet.runtime.session import Session

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Rivet"

KEY_MAP: dict[int, KeyCode] = {
    pygame.K_BACKSPACE: KeyCode.BACKSPACE,
    pygame.K_TAB: KeyCode.TAB,
    pygame.K_RETURN: KeyCode.ENTER,
    pygame.K_KP_ENTER: KeyCode.ENTER,
    pygame.K_ESCAPE: KeyCode.ESCAPE,
    pygame.K_END: KeyCode.END,
    pygame.K_HOME: KeyCode.HOME,
    pygame.K_LEFT: KeyCode.LEFT,
    pygame.K_UP: KeyCode.UP,
    pygame.K_RIGHT: KeyCode.RIGHT,
    pygame.K_DOWN: KeyCode.DOWN,
    pygame.K_DELETE: KeyCode.DELETE,
}

# pygame numbers buttons from 1 (left, middle, right); widgets see 0, 1, 2
MAX_MOUSE_BUTTON = 3


def load_font(config: RivetConfig) -> BinaryFont:
    """Font from config.font_path, or the system font if that fails."""
    if config.font_path is not None:
        try:
            font = load_font_file(config.font_path)
            logger.info("Loaded font %s", config.font_path)
            return font
        except (OSError, ValueError) as e:
            logger.error("Failed to load font %s: %s", config.font_path, e)
    return rasterize_system_font()


class Desktop:
    """
    Interactive pygame host.

    Redraws only after input; the clock caps the polling rate.
    """

    def __init__(self, config: Optional[RivetConfig] = None):
        self.config = config or RivetConfig()
        self._running = False

        pygame.init()
        self.window = pygame.display.set_mode(
            (
                self.config.width * self.config.scale_factor,
                self.config.height * self.config.scale_factor,
            )
        )
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.start_text_input()

        self.session = Session(load_font(self.config), self.config)
        self.session.launch(self.config.start_app)

        self._clock = pygame.time.Clock()
        self._mouse_location = Point(0, 0)
        self._mouse_down_location: Optional[Point] = None
        self._dirty = True

    def run(self) -> None:
        """Event loop; returns when the window is closed."""
        self._running = True

        while self._running:
            for event in pygame.event.get():
                self._process_event(event)

            if self._dirty:
                self._render()
                self._dirty = False

            self._clock.tick(self.config.target_fps)

        self._shutdown()

    def quit(self) -> None:
        self._running = False

    # Input

    def _to_screen(self, position: tuple[int, int]) -> Point:
        scale = self.config.scale_factor
        return Point(math.floor(position[0] / scale), math.floor(position[1] / scale))

    def _process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button > MAX_MOUSE_BUTTON:
                return
            self._mouse_location = self._to_screen(event.pos)
            self._mouse_down_location = self._mouse_location
            self._emit(MouseEvent(MouseAction.DOWN, self._mouse_location, event.button - 1))
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button > MAX_MOUSE_BUTTON:
                return
            self._mouse_location = self._to_screen(event.pos)
            self._emit(MouseEvent(MouseAction.UP, self._mouse_location, event.button - 1))
            self._mouse_down_location = None
        elif event.type == pygame.MOUSEMOTION:
            previous = self._mouse_location
            self._mouse_location = self._to_screen(event.pos)
            self._emit(
                MouseEvent(MouseAction.MOVE, self._mouse_location, previous_location=previous)
            )
        elif event.type == pygame.WINDOWENTER:
            self._emit(MouseEvent(MouseAction.ENTER, self._mouse_location))
        elif event.type == pygame.WINDOWLEAVE:
            self._emit(MouseEvent(MouseAction.LEAVE, self._mouse_location))
        elif event.type == pygame.KEYDOWN:
            key = KEY_MAP.get(event.key)
            if key is not None:
                self._emit(KeyEvent(key, KeyAction.DOWN))
        elif event.type == pygame.KEYUP:
            key = KEY_MAP.get(event.key)
            if key is not None:
                self._emit(KeyEvent(key, KeyAction.UP))
        elif event.type == pygame.TEXTINPUT:
            for char in event.text:
                self._emit(TypedEvent(char))

    def _emit(self, event) -> None:
        self.session.emit_event(event)
        self._dirty = True

    # Rendering

    def _render(self) -> None:
        self.session.draw(self._mouse_location, self._mouse_down_location)

        rgb = self.session.screen.to_rgb()
        frame = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        pygame.transform.scale(frame, self.window.get_size(), self.window)
        pygame.display.flip()

    def _shutdown(self) -> None:
        self.session.close()
        pygame.quit()
