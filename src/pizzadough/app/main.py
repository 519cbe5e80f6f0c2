"""
Run with: python -m pizzadough
"""
from __future__ import annotations

import logging
import sys

from pizzadough.app.application import create_app, parse_arguments
from pizzadough.app.ui.main_window import MainWindow
from pizzadough.logging_config import setup_logging
from pizzadough.platform.screen_lock import detect_screen_lock

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOptions(antialias=True)


def main() -> int:
    """Main entry point for the application."""
    app = create_app()
    options = parse_arguments(app)
    setup_logging(
        level=logging.DEBUG if options["debug"] else logging.INFO,
        log_file=options["log_file"],
    )

    win = MainWindow(screen_lock=detect_screen_lock())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
