"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (ModelState).
2. Instantiates the Main Window (View).
3. Hands both to the Controller, which wires them together.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import os
import sys

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from regressionplayground.config import ORG_ID, APP_ID, VISIBLE_APP_NAME
from regressionplayground.controller.playground import PlaygroundController
from regressionplayground.logging_config import setup_logging
from regressionplayground.model.state import ModelState
from regressionplayground.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOptions(antialias=True)

    return app


def main() -> int:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every slider move
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = ModelState()

    # 4. Initialize the Main Window and the Controller
    window = MainWindow()
    controller = PlaygroundController(state, window)
    controller.start()

    window.show()
    logger.info("Application started.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
