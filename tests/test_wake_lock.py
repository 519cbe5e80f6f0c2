import logging

import pytest

from pizzadough.model.wake_lock import WakeLockController, WakeLockState
from pizzadough.platform.screen_lock import UnsupportedScreenLock

from conftest import FakeScreenLock


@pytest.fixture
def controller(screen_lock, display):
    return WakeLockController(capability=screen_lock, display=display)


def test_starts_released(controller, display):
    assert controller.state is WakeLockState.RELEASED
    assert not controller.is_held
    assert display.calls == []


def test_toggle_acquires(controller, screen_lock, display):
    assert controller.toggle() is WakeLockState.HELD

    assert controller.is_held
    assert len(screen_lock.handles) == 1
    assert display.last == "awake"


def test_toggle_twice_releases_immediately(controller, screen_lock, display):
    controller.toggle()
    assert controller.toggle() is WakeLockState.RELEASED

    handle = screen_lock.handles[0]
    assert handle.release_calls == 1
    assert handle.released
    assert display.calls == ["awake", "asleep"]


def test_unsupported_host_stays_released(display, caplog):
    controller = WakeLockController(capability=UnsupportedScreenLock(), display=display)

    with caplog.at_level(logging.WARNING, logger="pizzadough"):
        assert controller.toggle() is WakeLockState.RELEASED

    assert display.calls == []
    assert any(r.levelno == logging.WARNING and "not supported" in r.getMessage() for r in caplog.records)


def test_unsupported_is_reported_on_every_toggle(display, caplog):
    capability = FakeScreenLock(supported=False)
    controller = WakeLockController(capability=capability, display=display)

    with caplog.at_level(logging.WARNING, logger="pizzadough"):
        controller.toggle()
        controller.toggle()

    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2
    assert capability.handles == []


def test_rejected_request_is_logged_and_state_kept(display, caplog):
    controller = WakeLockController(capability=FakeScreenLock(fail=True), display=display)

    with caplog.at_level(logging.ERROR, logger="pizzadough"):
        assert controller.toggle() is WakeLockState.RELEASED

    assert display.calls == []
    assert "request denied" in caplog.text


def test_host_release_resets_without_toggle(controller, screen_lock, display):
    controller.toggle()

    screen_lock.handles[0].revoke()

    assert controller.state is WakeLockState.RELEASED
    assert display.last == "asleep"
    assert len(screen_lock.handles) == 1


def test_toggle_after_host_release_acquires_again(controller, screen_lock):
    controller.toggle()
    screen_lock.handles[0].revoke()

    assert controller.toggle() is WakeLockState.HELD
    assert len(screen_lock.handles) == 2


def test_failed_release_still_releases(display, caplog):
    controller = WakeLockController(capability=FakeScreenLock(fail_release=True), display=display)
    controller.toggle()

    with caplog.at_level(logging.ERROR, logger="pizzadough"):
        assert controller.toggle() is WakeLockState.RELEASED

    assert display.last == "asleep"
    assert "release refused" in caplog.text


def test_visibility_ignored_while_released(controller, screen_lock, display):
    controller.on_visibility_regained()

    assert controller.state is WakeLockState.RELEASED
    assert screen_lock.handles == []
    assert display.calls == []


def test_visibility_reacquires_while_held(controller, screen_lock, display):
    controller.toggle()
    first = screen_lock.handles[0]

    controller.on_visibility_regained()

    assert controller.state is WakeLockState.HELD
    assert len(screen_lock.handles) == 2
    assert first.released
    assert display.calls == ["awake"]

    # the new handle reports host releases too
    screen_lock.handles[1].revoke()
    assert controller.state is WakeLockState.RELEASED
    assert display.last == "asleep"


def test_visibility_reacquire_failure_drops_to_released(controller, screen_lock, display, caplog):
    controller.toggle()
    screen_lock.fail = True

    with caplog.at_level(logging.ERROR, logger="pizzadough"):
        controller.on_visibility_regained()

    assert controller.state is WakeLockState.RELEASED
    assert display.last == "asleep"
    assert "re-acquire" in caplog.text


def test_state_change_callback(screen_lock, display):
    changes = []
    controller = WakeLockController(screen_lock, display, on_state_changed=changes.append)

    controller.toggle()
    controller.toggle()
    controller.toggle()
    screen_lock.handles[-1].revoke()

    assert changes == [
        WakeLockState.HELD, WakeLockState.RELEASED, WakeLockState.HELD, WakeLockState.RELEASED,
    ]


def test_handle_notifies_listeners_once(screen_lock):
    handle = screen_lock.acquire()
    calls = []
    handle.add_release_listener(lambda: calls.append("released"))

    handle.release()
    handle.release()
    handle.revoke()

    assert calls == ["released"]
    assert handle.release_calls == 1
