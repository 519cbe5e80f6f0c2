import pytest

from pizzadough.model.wake_lock import (
    CapabilityAcquisitionFailed,
    CapabilityUnsupported,
    WakeLockError,
)
from pizzadough.platform.screen_lock import (
    ES_CONTINUOUS,
    ES_DISPLAY_REQUIRED,
    FreedesktopScreenLock,
    UnsupportedScreenLock,
    WindowsScreenLock,
    detect_screen_lock,
)


class FakeKernel32:
    def __init__(self, result: int = 1) -> None:
        self.result = result
        self.calls: list[int] = []

    def SetThreadExecutionState(self, flags: int) -> int:
        self.calls.append(flags)
        return self.result


@pytest.mark.parametrize("platform, expected", [
    ("win32", WindowsScreenLock),
    ("linux", FreedesktopScreenLock),
    ("freebsd14", FreedesktopScreenLock),
    ("darwin", UnsupportedScreenLock),
    ("emscripten", UnsupportedScreenLock),
])
def test_detect_screen_lock(platform, expected):
    assert isinstance(detect_screen_lock(platform), expected)


def test_unsupported_screen_lock():
    capability = UnsupportedScreenLock()

    assert not capability.is_supported()
    with pytest.raises(CapabilityUnsupported):
        capability.acquire()


def test_windows_acquire_and_release():
    kernel32 = FakeKernel32()
    capability = WindowsScreenLock(kernel32=kernel32)

    assert capability.is_supported()
    handle = capability.acquire()
    handle.release()

    assert kernel32.calls == [ES_CONTINUOUS | ES_DISPLAY_REQUIRED, ES_CONTINUOUS]
    assert handle.released


def test_windows_rejected_request():
    capability = WindowsScreenLock(kernel32=FakeKernel32(result=0))

    with pytest.raises(CapabilityAcquisitionFailed):
        capability.acquire()


def test_windows_failed_release_still_notifies():
    kernel32 = FakeKernel32()
    handle = WindowsScreenLock(kernel32=kernel32).acquire()
    calls = []
    handle.add_release_listener(lambda: calls.append(True))
    kernel32.result = 0

    with pytest.raises(WakeLockError):
        handle.release()

    assert calls == [True]
    assert handle.released


def test_freedesktop_construction_is_lazy():
    capability = FreedesktopScreenLock(application="test", reason="testing")

    assert capability.application == "test"
    assert capability.reason == "testing"
    assert capability._interface is None
