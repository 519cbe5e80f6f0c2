"""
Screen Wake Lock
================
Keeps the display awake while the user is baking.

Why is this file needed?
------------------------
1. State Management: `WakeLockController` owns the Released/Held state and
   the current handle; no module-level globals.
2. Decoupling: The platform capability and the display are injected, so the
   state machine runs the same against D-Bus, Win32 or a test fake.

Classes:
    WakeLockState: Released / Held.
    ScreenLock: Abstract platform capability.
    ScreenLockHandle: A held lock with a release notification.
    WakeLockController: The state machine.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

ReleaseListener = Callable[[], None]


class WakeLockError(Exception):
    """Base class for screen wake lock failures."""


class CapabilityUnsupported(WakeLockError):
    """The host has no way to keep the screen awake. Permanent."""


class CapabilityAcquisitionFailed(WakeLockError):
    """The host refused the wake lock request."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class WakeLockState(Enum):
    RELEASED = "released"
    HELD = "held"


class ScreenLockHandle(ABC):
    """
    A held screen lock.

    Listeners are notified once, whether the lock is released by its owner or
    revoked by the host.
    """

    def __init__(self) -> None:
        self._listeners: list[ReleaseListener] = []
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def add_release_listener(self, listener: ReleaseListener) -> None:
        self._listeners.append(listener)

    def remove_release_listener(self, listener: ReleaseListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def release(self) -> None:
        """Give the lock back to the host. Does nothing if already released."""
        if self._released:
            return
        try:
            self._release()
        finally:
            self._notify_released()

    def _notify_released(self) -> None:
        """Mark the handle released and notify listeners. Backends call this on revocation."""
        if self._released:
            return
        self._released = True
        for listener in list(self._listeners):
            listener()
        self._listeners.clear()

    @abstractmethod
    def _release(self) -> None:
        """Backend-specific release."""


class ScreenLock(ABC):
    """A platform capability that keeps the screen awake while a handle is held."""

    name: str = "screen-lock"

    @abstractmethod
    def is_supported(self) -> bool:
        """Whether the host offers the capability at all."""

    @abstractmethod
    def acquire(self) -> ScreenLockHandle:
        """
        Request the lock.

        Raises:
            CapabilityUnsupported: If the host has no such capability.
            CapabilityAcquisitionFailed: If the host rejected the request.
        """


class WakeLockDisplay(Protocol):
    def show_awake(self) -> None: ...
    def show_asleep(self) -> None: ...


class WakeLockController:
    """
    Two-state machine around a ScreenLock.

    Transitions:
        toggle in RELEASED -> acquire, HELD on success.
        toggle in HELD -> release, RELEASED immediately.
        release notification -> RELEASED, display reset.
        visibility regained in HELD -> re-acquire.
    """

    def __init__(
        self,
        capability: ScreenLock,
        display: WakeLockDisplay,
        on_state_changed: Optional[Callable[[WakeLockState], None]] = None,
    ) -> None:
        self._capability = capability
        self._display = display
        self._on_state_changed = on_state_changed
        self._state = WakeLockState.RELEASED
        self._handle: Optional[ScreenLockHandle] = None

    @property
    def state(self) -> WakeLockState:
        return self._state

    @property
    def is_held(self) -> bool:
        return self._state is WakeLockState.HELD

    # ---- events ----

    def toggle(self) -> WakeLockState:
        """Handle the stay-awake button. Returns the resulting state."""
        if self._state is WakeLockState.HELD:
            self._release()
        else:
            self._acquire()
        return self._state

    def on_visibility_regained(self) -> None:
        """Hosts drop the lock when the window is hidden; take it again."""
        if self._state is not WakeLockState.HELD:
            return

        logger.debug("Visibility regained, re-acquiring screen wake lock.")
        try:
            handle = self._capability.acquire()
        except WakeLockError as err:
            logger.error("Could not re-acquire screen wake lock: %s", err)
            self._drop_handle()
            self._mark_released()
            return

        self._drop_handle()
        self._attach(handle)

    # ---- transitions ----

    def _acquire(self) -> None:
        if not self._capability.is_supported():
            logger.warning("Screen wake lock is not supported on this host (%s).", self._capability.name)
            return

        try:
            handle = self._capability.acquire()
        except CapabilityUnsupported as err:
            logger.warning("Screen wake lock is not supported on this host: %s", err)
            return
        except CapabilityAcquisitionFailed as err:
            logger.error("Screen wake lock request was rejected: %s", err.reason)
            return

        self._attach(handle)
        self._set_state(WakeLockState.HELD)
        self._display.show_awake()
        logger.info("Screen wake lock acquired.")

    def _release(self) -> None:
        handle, self._handle = self._handle, None
        self._mark_released()
        if handle is None:
            return

        handle.remove_release_listener(self._on_released)
        try:
            handle.release()
        except WakeLockError as err:
            logger.error("Failed to release screen wake lock: %s", err)
        else:
            logger.info("Screen wake lock released.")

    def _on_released(self) -> None:
        logger.info("Screen wake lock was released by the host.")
        self._handle = None
        self._mark_released()

    # ---- helpers ----

    def _attach(self, handle: ScreenLockHandle) -> None:
        self._handle = handle
        handle.add_release_listener(self._on_released)

    def _drop_handle(self) -> None:
        """Forget the current handle, releasing it quietly if the host has not."""
        handle, self._handle = self._handle, None
        if handle is None:
            return
        handle.remove_release_listener(self._on_released)
        if not handle.released:
            try:
                handle.release()
            except WakeLockError as err:
                logger.warning("Failed to release stale screen wake lock: %s", err)

    def _mark_released(self) -> None:
        self._set_state(WakeLockState.RELEASED)
        self._display.show_asleep()

    def _set_state(self, state: WakeLockState) -> None:
        if state is self._state:
            return
        self._state = state
        if self._on_state_changed is not None:
            self._on_state_changed(state)
