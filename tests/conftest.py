from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from pizzadough.model.wake_lock import (
    CapabilityAcquisitionFailed,
    CapabilityUnsupported,
    ScreenLock,
    ScreenLockHandle,
    WakeLockError,
)


class FakeHandle(ScreenLockHandle):
    def __init__(self, fail_release: bool = False) -> None:
        super().__init__()
        self.release_calls = 0
        self.fail_release = fail_release

    def _release(self) -> None:
        self.release_calls += 1
        if self.fail_release:
            raise WakeLockError("release refused")

    def revoke(self) -> None:
        """Simulate the host taking the lock away."""
        self._notify_released()


class FakeScreenLock(ScreenLock):
    name = "fake"

    def __init__(self, supported: bool = True, fail: bool = False, fail_release: bool = False) -> None:
        self.supported = supported
        self.fail = fail
        self.fail_release = fail_release
        self.handles: list[FakeHandle] = []

    def is_supported(self) -> bool:
        return self.supported

    def acquire(self) -> ScreenLockHandle:
        if not self.supported:
            raise CapabilityUnsupported("fake host has no wake lock")
        if self.fail:
            raise CapabilityAcquisitionFailed("NotAllowedError: request denied")
        handle = FakeHandle(fail_release=self.fail_release)
        self.handles.append(handle)
        return handle


class FakeDisplay:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def show_awake(self) -> None:
        self.calls.append("awake")

    def show_asleep(self) -> None:
        self.calls.append("asleep")

    @property
    def last(self) -> str | None:
        return self.calls[-1] if self.calls else None


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def screen_lock() -> FakeScreenLock:
    return FakeScreenLock()


@pytest.fixture
def display() -> FakeDisplay:
    return FakeDisplay()
