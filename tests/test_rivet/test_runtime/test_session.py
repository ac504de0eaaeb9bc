import logging

import pytest

from rivet.core.config import RivetConfig
from rivet.core.events import MouseAction, MouseEvent, TypedEvent
from rivet.core.rect import Point, Rect
from rivet.graphics.palette import RED, WHITE
from rivet.runtime.context import Application
from rivet.runtime.session import Session
from rivet.ui.base_widget import BaseWidget

class Fill(BaseWidget):
    kind = "fill"

    def __init__(self, manager, rect, color):
        super().__init__(manager, rect)
        self.color = color
        self.typed = []

    def handle_event(self, event):
        if isinstance(event, TypedEvent):
            self.typed.append(event.char)

    def draw(self, ui):
        ui.draw_rect(0, 0, self.rect.width, self.rect.height, self.color)

def fill_application(context):
    widget = Fill(context.manager, Rect(0, 0, 10, 10), WHITE)
    context.manager.set_application_widget(widget)
    return Application(lambda location, down=None: widget.delegate_draw(context.drawer), "fill")

@pytest.fixture
def session(blank_font):
    session = Session(blank_font, RivetConfig())
    yield session
    session.close()

def test_screen_and_drawer_share_pixels(session):
    session.screen.draw_pixel(0, 0, RED)
    assert session.drawer.get_pixel(0, 0) == RED

def test_start_installs_application(session):
    application = session.start(fill_application)

    assert session.application is application
    assert session.application_name == "fill"
    assert session.manager.application_widget is not None

    session.emit_event(TypedEvent("x"))
    assert session.manager.application_widget.typed == ["x"]

def test_context_fields(session):
    seen = []

    def capture(context):
        seen.append(context)
        return fill_application(context)

    session.start(capture)
    context = seen[0]
    assert context.screen is session.screen
    assert context.drawer is session.drawer
    assert context.screen_width == 320
    assert context.screen_height == 200
    assert context.manager is session.manager
    assert context.launch == session.launch

def test_draw_renders_modal_on_top(session):
    session.start(fill_application)
    modal = Fill(session.manager, Rect(5, 5, 10, 10), RED)
    session.manager.set_modal(modal)

    session.draw()

    assert session.screen.get_pixel(0, 0) == WHITE
    assert session.screen.get_pixel(7, 7) == RED

def test_launch_unknown_application(session):
    with pytest.raises(KeyError, match="Unknown application"):
        session.launch("nope")

def test_launch_replaces_manager_and_keeps_log(session):
    session.start(fill_application)
    first_manager = session.manager
    session.log.write("kept")

    session.launch("calculator")

    assert session.manager is not first_manager
    assert session.manager.log is session.log
    assert session.application_name == "calculator"
    assert "kept" in session.log.read()

def test_launch_during_event_is_deferred(session):
    launched_inside = []

    class Launcher(BaseWidget):
        def handle_event(self, event):
            if isinstance(event, MouseEvent) and event.action is MouseAction.DOWN:
                session.launch("about")
                launched_inside.append(session.application_name)

    def launcher_application(context):
        widget = Launcher(context.manager, Rect(0, 0, 320, 200))
        context.manager.set_application_widget(widget)
        return Application(lambda location, down=None: None, "launcher")

    session.start(launcher_application)
    session.emit_event(MouseEvent(MouseAction.DOWN, Point(5, 5)))

    assert launched_inside == ["launcher"]
    assert session.application_name == "about"

def test_runtime_logs_reach_system_log(session):
    logging.getLogger("rivet.tests.session").warning("low disk")
    assert "WARNING rivet.tests.session: low disk" in session.log.read()

def test_close_detaches_handler(blank_font):
    session = Session(blank_font)
    session.close()
    logging.getLogger("rivet.tests.session").warning("after close")
    assert session.log.read() == []

def test_session_leaves_logger_level_alone(blank_font):
    rivet_logger = logging.getLogger("rivet")
    level = rivet_logger.level

    with Session(blank_font, RivetConfig(log_level="DEBUG")) as session:
        assert rivet_logger.level == level
        assert session._log_handler.level == logging.DEBUG

def test_context_manager_detaches_handler(blank_font):
    rivet_logger = logging.getLogger("rivet")
    handlers = list(rivet_logger.handlers)

    with Session(blank_font) as session:
        assert len(rivet_logger.handlers) == len(handlers) + 1

    assert rivet_logger.handlers == handlers
    logging.getLogger("rivet.tests.session").warning("after exit")
    assert session.log.read() == []

def test_handler_filters_below_configured_level(blank_font):
    with Session(blank_font, RivetConfig(log_level="ERROR")) as session:
        logging.getLogger("rivet.tests.session").warning("ignored")
        logging.getLogger("rivet.tests.session").error("kept")

    assert session.log.read() == ["ERROR rivet.tests.session: kept"]
