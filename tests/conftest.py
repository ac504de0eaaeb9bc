import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure rivet can be imported from a source checkout
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.time'), \
         patch('pygame.image'), \
         patch('pygame.key'), \
         patch('pygame.mouse'):

        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)

        yield

@pytest.fixture
def blank_font():
    """6px monospace font with empty glyphs: every character advances 6px."""
    from rivet.graphics.font import blank_font
    return blank_font(6, 8)

@pytest.fixture
def config():
    from rivet.core.config import RivetConfig
    return RivetConfig()

@pytest.fixture
def surface():
    from rivet.graphics.surface import Surface
    return Surface(320, 200)

@pytest.fixture
def drawer(blank_font):
    from rivet.graphics.drawer import InterfaceDrawer
    return InterfaceDrawer(blank_font, 320, 200)

@pytest.fixture
def manager(drawer, config):
    """Manager on a 320x200 screen with no application installed."""
    from rivet.ui.manager import Manager
    return Manager(drawer, config)

@pytest.fixture
def make_headless(blank_font):
    """Factory for HeadlessRivet instances; their log handlers are detached afterwards."""
    from rivet.runtime.headless import HeadlessRivet

    created = []

    def _make(application, config=None):
        rivet = HeadlessRivet(application, blank_font, config)
        created.append(rivet)
        return rivet

    yield _make

    for rivet in created:
        rivet.close()
