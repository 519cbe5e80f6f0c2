"""
Main window: input and result panels on the left, disk preview on the right,
the stay-awake toggle in the toolbar and a diagnostic console at the bottom.
"""
from __future__ import annotations

import logging
from datetime import datetime

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QMainWindow, QDockWidget, QPlainTextEdit, QToolBar,
)

from pizzadough.app.state import Store
from pizzadough.app.ui.panels.inputs import InputPanel
from pizzadough.app.ui.panels.results import ResultsPanel
from pizzadough.app.ui.wake_lock_button import WakeLockButton
from pizzadough.app.ui.workarea import WorkArea
from pizzadough.config import VISIBLE_APP_NAME
from pizzadough.model.dough import DoughResult
from pizzadough.model.wake_lock import ScreenLock, WakeLockController, WakeLockState


class Console(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMaximumBlockCount(500)

    def _log(self, level: str, msg: str) -> None:
        self.appendPlainText(f"{datetime.now().strftime('%d.%m.%Y %H:%M:%S')} [{level}] {msg}")

    def info(self, msg: str) -> None:
        self._log("info", msg)

    def warn(self, msg: str) -> None:
        self._log("warn", msg)

    def error(self, msg: str) -> None:
        self._log("error", msg)


class ConsoleLogHandler(logging.Handler):
    """Forwards package log records to the console widget."""
    def __init__(self, console: Console, level: int = logging.INFO, reveal=None) -> None:
        super().__init__(level)
        self.console = console
        self.reveal = reveal

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        if record.levelno >= logging.ERROR:
            self.console.error(msg)
        elif record.levelno >= logging.WARNING:
            self.console.warn(msg)
        else:
            self.console.info(msg)
        if record.levelno >= logging.WARNING and self.reveal is not None:
            self.reveal()


class MainWindow(QMainWindow):
    def __init__(self, screen_lock: ScreenLock, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1000, 680)

        # Global store
        self.store = store or Store()

        # ---- Central: panels + preview ----
        self.input_panel = InputPanel(self.store, parent=self)
        self.results_panel = ResultsPanel(self.store, parent=self)
        self.work_area = WorkArea([self.input_panel, self.results_panel], self)
        self.setCentralWidget(self.work_area)
        self.store.result_changed.connect(self._on_result_changed)

        # ---- Toolbar: stay awake ----
        toolbar = QToolBar(self.tr("Baking"), self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        self.wake_button = WakeLockButton(toolbar)
        toolbar.addWidget(self.wake_button)

        self.wake_lock = WakeLockController(
            capability=screen_lock,
            display=self.wake_button,
            on_state_changed=self._on_wake_state_changed,
        )
        self.wake_button.clicked.connect(lambda *_: self.wake_lock.toggle())

        # Hosts drop the lock while the window is hidden
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.connect(self._on_application_state_changed)

        # ---- Bottom: diagnostic console ----
        self.console = Console(self)
        dock = QDockWidget(self.tr("Log"), self)
        dock.setObjectName("log-dock")
        dock.setWidget(self.console)
        dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetClosable)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, dock)
        dock.hide()
        self.menuBar().addMenu(self.tr("View")).addAction(dock.toggleViewAction())

        self._log_handler = ConsoleLogHandler(self.console, reveal=dock.show)
        self._log_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger("pizzadough").addHandler(self._log_handler)

        self.statusBar()

        # Initial calculation
        self.store.recalculate()

    @Slot(object)
    def _on_result_changed(self, result: DoughResult) -> None:
        self.work_area.preview.set_result(result)

    @Slot(Qt.ApplicationState)
    def _on_application_state_changed(self, state: Qt.ApplicationState) -> None:
        if state == Qt.ApplicationState.ApplicationActive:
            self.wake_lock.on_visibility_regained()

    def _on_wake_state_changed(self, state: WakeLockState) -> None:
        if state is WakeLockState.HELD:
            self.statusBar().showMessage(self.tr("Screen will stay awake."), 3000)
        else:
            self.statusBar().showMessage(self.tr("Screen may sleep."), 3000)

    def closeEvent(self, event) -> None:
        if self.wake_lock.is_held:
            self.wake_lock.toggle()
        logging.getLogger("pizzadough").removeHandler(self._log_handler)
        super().closeEvent(event)

