"""
Application Initialization
==========================
This module wires the state and the window together and starts the Qt
event loop.

It acts as the composition root. It:
1. Instantiates the application state (CounterState).
2. Instantiates the main window (View), passing the state in.
3. Runs the event loop until the window is closed.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTranslator, QLibraryInfo

from wordcounter import config
from wordcounter.logging_config import setup_logging
from wordcounter.model.state import CounterState
from wordcounter.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (console only)
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_TITLE)

    # 3. Ukrainian texts for Qt standard widgets (file dialog buttons etc.)
    translator = QTranslator(app)
    if translator.load("qtbase_uk", QLibraryInfo.path(QLibraryInfo.TranslationsPath)):
        app.installTranslator(translator)

    # 4. Initialize the State
    state = CounterState()

    # 5. Initialize the Main Window, passing the state
    window = MainWindow(state)
    window.show()
    logger.info("Window shown, entering event loop.")

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
