import pytest

from rivet.core.events import KeyCode, KeyEvent, MouseAction, MouseEvent
from rivet.core.rect import Point, Rect
from rivet.ui.base_widget import BaseWidget
from rivet.ui.widgets.button import TextButton
from rivet.ui.widgets.confirm_modal import (
    ConfirmModal,
    ConfirmModalOptions,
    ConfirmResult,
    show_confirm_modal,
)

# Modal sits at (110, 70) on a 320x200 screen
OK_POINT = (110 + 62 + 5, 70 + 38 + 5)
CANCEL_POINT = (110 + 8 + 5, 70 + 38 + 5)

@pytest.fixture
def app(manager):
    root = BaseWidget(manager, Rect(0, 0, 320, 200))
    manager.set_application_widget(root)
    return root

def click(manager, point):
    manager.emit_event(MouseEvent(MouseAction.DOWN, Point(*point)))
    manager.emit_event(MouseEvent(MouseAction.UP, Point(*point)))

def test_layout(manager):
    modal = ConfirmModal(manager)

    assert modal.rect == Rect(110, 70, 100, 60)
    cancel, ok = modal.children
    assert isinstance(cancel, TextButton) and cancel.label == "Cancel"
    assert isinstance(ok, TextButton) and ok.label == "OK"
    assert cancel.rect.origin == Point(8, 38)
    assert ok.rect.origin == Point(62, 38)

def test_default_options():
    options = ConfirmModalOptions()
    assert options.title == "Confirm"
    assert options.message == "Are you sure?"
    assert options.confirm_text == "OK"
    assert options.cancel_text == "Cancel"

def test_show_installs_modal(manager, app):
    modal = ConfirmModal(manager)
    future = modal.show()

    assert manager.modal_widget is modal
    assert not future.done()
    assert not future.cancel()
    assert modal.is_open

def test_show_while_modal_active(manager, app):
    ConfirmModal(manager).show()
    with pytest.raises(RuntimeError):
        ConfirmModal(manager).show()

def test_ok_click_confirms(manager, app):
    confirmed = []
    modal = ConfirmModal(manager, ConfirmModalOptions(on_confirm=lambda: confirmed.append(True)))
    future = modal.show()

    click(manager, OK_POINT)

    assert future.result() == ConfirmResult(confirmed=True)
    assert confirmed == [True]
    assert manager.modal_widget is None
    assert not modal.is_open

def test_cancel_click_cancels(manager, app):
    cancelled = []
    future = show_confirm_modal(
        manager, ConfirmModalOptions(on_cancel=lambda: cancelled.append(True))
    )

    click(manager, CANCEL_POINT)

    assert future.result() == ConfirmResult(confirmed=False)
    assert cancelled == [True]
    assert manager.modal_widget is None

def test_keyboard_when_focused(manager, app):
    modal = ConfirmModal(manager)
    future = modal.show()
    manager.request_focus(modal)

    manager.emit_event(KeyEvent(KeyCode.ESCAPE))
    assert future.result().confirmed is False

def test_enter_confirms(manager, app):
    modal = ConfirmModal(manager)
    future = modal.show()
    manager.request_focus(modal)

    manager.emit_event(KeyEvent(KeyCode.ENTER))
    assert future.result().confirmed is True

def test_modal_cleared_before_future_resolves(manager, app):
    second = []

    def open_another(future):
        second.append(ConfirmModal(manager).show())

    ConfirmModal(manager).show().add_done_callback(open_another)
    click(manager, OK_POINT)

    assert len(second) == 1
    assert manager.modal_widget is not None

def test_draw(manager, drawer):
    modal = ConfirmModal(manager, ConfirmModalOptions(title="Quit", message="Really?"))
    modal.delegate_draw(drawer)
    assert drawer.transform_depth == 0
