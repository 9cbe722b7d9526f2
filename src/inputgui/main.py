"""
Main entry point for the reusable inputs demo application.
"""

import sys

from PySide6.QtWidgets import QApplication

from inputgui.app_config import setup_qsettings
from inputgui.error_handler import init_logging, setup_error_handling
from inputgui.main_window import MainWindow


def main() -> int:
    """Main application entry point."""
    setup_qsettings()
    app = QApplication(sys.argv)

    init_logging()
    setup_error_handling()

    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
