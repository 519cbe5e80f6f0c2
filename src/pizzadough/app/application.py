from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCommandLineOption, QCommandLineParser, QCoreApplication
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication

from pizzadough import __version__
from pizzadough.config import APP_ID, ICON_PATH, VISIBLE_APP_NAME


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(__version__)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    if os.path.exists(ICON_PATH):
        app.setWindowIcon(QIcon(ICON_PATH))

    return app


def parse_arguments(app: QCoreApplication) -> dict[str, object]:
    """
    Parse the command line of the running application.

    Returns:
        {"debug": bool, "log_file": str | None}
    """
    parser = QCommandLineParser()
    parser.setApplicationDescription(VISIBLE_APP_NAME)
    parser.addHelpOption()
    parser.addVersionOption()

    debug = QCommandLineOption(["d", "debug"], "Log everything, including recalculations.")
    log_file = QCommandLineOption(["log-file"], "Also write the log to <file>.", "file")
    parser.addOption(debug)
    parser.addOption(log_file)
    parser.process(app)

    return {
        "debug": parser.isSet(debug),
        "log_file": parser.value(log_file) or None,
    }
