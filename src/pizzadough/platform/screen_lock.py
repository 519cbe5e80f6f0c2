"""
Platform Screen Locks
=====================
Concrete `ScreenLock` capabilities for the hosts the app runs on.

Classes:
    FreedesktopScreenLock: org.freedesktop.ScreenSaver inhibition over D-Bus.
    WindowsScreenLock: SetThreadExecutionState through ctypes.
    UnsupportedScreenLock: Hosts without any capability.

Functions:
    detect_screen_lock: Pick the capability for the running platform.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtDBus import QDBusConnection, QDBusInterface, QDBusMessage

from pizzadough.config import APP_ID, WAKE_LOCK_REASON
from pizzadough.model.wake_lock import (
    CapabilityAcquisitionFailed,
    CapabilityUnsupported,
    ScreenLock,
    ScreenLockHandle,
    WakeLockError,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------------
# Unsupported
# -------------------------------------------------------------------------------

class UnsupportedScreenLock(ScreenLock):
    name = "unsupported"

    def is_supported(self) -> bool:
        return False

    def acquire(self) -> ScreenLockHandle:
        raise CapabilityUnsupported(f"No screen wake lock available on '{sys.platform}'.")


# -------------------------------------------------------------------------------
# Linux / BSD desktops
# -------------------------------------------------------------------------------

class _FreedesktopHandle(ScreenLockHandle):
    def __init__(self, interface: QDBusInterface, cookie: int) -> None:
        super().__init__()
        self._interface = interface
        self.cookie = cookie

    def _release(self) -> None:
        reply = self._interface.call("UnInhibit", self.cookie)
        if reply.type() == QDBusMessage.MessageType.ErrorMessage:
            raise WakeLockError(f"{reply.errorName()}: {reply.errorMessage()}")


class FreedesktopScreenLock(ScreenLock):
    """
    Inhibits the screen saver through the session bus.

    The interface is created lazily so that constructing the capability never
    touches D-Bus.
    """
    name = "org.freedesktop.ScreenSaver"

    SERVICE = "org.freedesktop.ScreenSaver"
    PATH = "/org/freedesktop/ScreenSaver"
    INTERFACE = "org.freedesktop.ScreenSaver"

    def __init__(
        self,
        application: str = APP_ID,
        reason: str = WAKE_LOCK_REASON,
        bus: Optional[QDBusConnection] = None,
    ) -> None:
        self.application = application
        self.reason = reason
        self._bus = bus
        self._interface: Optional[QDBusInterface] = None

    def _get_interface(self) -> QDBusInterface:
        if self._interface is None:
            bus = self._bus if self._bus is not None else QDBusConnection.sessionBus()
            self._interface = QDBusInterface(self.SERVICE, self.PATH, self.INTERFACE, bus)
        return self._interface

    def is_supported(self) -> bool:
        bus = self._bus if self._bus is not None else QDBusConnection.sessionBus()
        if not bus.isConnected():
            logger.debug("D-Bus session bus is not connected.")
            return False
        return self._get_interface().isValid()

    def acquire(self) -> ScreenLockHandle:
        interface = self._get_interface()
        reply = interface.call("Inhibit", self.application, self.reason)
        if reply.type() == QDBusMessage.MessageType.ErrorMessage:
            raise CapabilityAcquisitionFailed(f"{reply.errorName()}: {reply.errorMessage()}")

        arguments = reply.arguments()
        if not arguments:
            raise CapabilityAcquisitionFailed("Inhibit returned no cookie.")

        cookie = int(arguments[0])
        logger.debug("Screen saver inhibited, cookie %d.", cookie)
        return _FreedesktopHandle(interface, cookie)


# -------------------------------------------------------------------------------
# Windows
# -------------------------------------------------------------------------------

ES_CONTINUOUS = 0x80000000
ES_DISPLAY_REQUIRED = 0x00000002


class _WindowsHandle(ScreenLockHandle):
    def __init__(self, kernel32) -> None:
        super().__init__()
        self._kernel32 = kernel32

    def _release(self) -> None:
        if not self._kernel32.SetThreadExecutionState(ES_CONTINUOUS):
            raise WakeLockError("SetThreadExecutionState failed to clear the display request.")


class WindowsScreenLock(ScreenLock):
    name = "SetThreadExecutionState"

    def __init__(self, kernel32=None) -> None:
        self._kernel32 = kernel32

    def _get_kernel32(self):
        if self._kernel32 is None:
            try:
                import ctypes
                self._kernel32 = ctypes.windll.kernel32
            except (AttributeError, ImportError) as err:
                raise CapabilityUnsupported("kernel32 is not available.") from err
        return self._kernel32

    def is_supported(self) -> bool:
        try:
            self._get_kernel32()
        except CapabilityUnsupported:
            return False
        return True

    def acquire(self) -> ScreenLockHandle:
        kernel32 = self._get_kernel32()
        if not kernel32.SetThreadExecutionState(ES_CONTINUOUS | ES_DISPLAY_REQUIRED):
            raise CapabilityAcquisitionFailed("SetThreadExecutionState returned 0.")
        return _WindowsHandle(kernel32)


def detect_screen_lock(platform: Optional[str] = None) -> ScreenLock:
    """Pick the screen lock capability for the given (or running) platform."""
    platform = platform or sys.platform

    if platform == "win32":
        capability: ScreenLock = WindowsScreenLock()
    elif platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        capability = FreedesktopScreenLock()
    else:
        capability = UnsupportedScreenLock()

    logger.debug("Using screen lock capability '%s' on '%s'.", capability.name, platform)
    return capability
