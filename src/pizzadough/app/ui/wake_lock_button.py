from __future__ import annotations

from PySide6.QtWidgets import QPushButton, QWidget

from pizzadough.config import WAKE_ICON_ASLEEP, WAKE_ICON_AWAKE, WAKE_TEXT_ASLEEP, WAKE_TEXT_AWAKE


class WakeLockButton(QPushButton):
    """Stay-awake toggle. Acts as the display of a WakeLockController."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.show_asleep()

    def show_awake(self) -> None:
        self.setText(f"{WAKE_ICON_AWAKE} {self.tr(WAKE_TEXT_AWAKE)}")
        self._set_active(True)

    def show_asleep(self) -> None:
        self.setText(f"{WAKE_ICON_ASLEEP} {self.tr(WAKE_TEXT_ASLEEP)}")
        self._set_active(False)

    def _set_active(self, active: bool) -> None:
        # exposed to style sheets as [wakeActive="true"]
        self.setProperty("wakeActive", active)
        self.style().unpolish(self)
        self.style().polish(self)
