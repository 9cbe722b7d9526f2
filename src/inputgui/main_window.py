"""
Demo window showing an email field and a password field.
"""

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from inputcore.errors import BaseAppError, ValidationError
from inputgui.error_handler import get_error_handler
from inputgui.widgets import PasswordInputWidget, ReusableInputWidget

logger = logging.getLogger(__name__)

EMAIL_FIELD_CONFIG = {
    "title": "Email",
    "placeholder": "Enter email",
    "is_email": True,
}

STATUS_MESSAGE_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Main window with one email input and one password input."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Reusable Inputs")
        self.resize(420, 360)
        self._setup_ui()

        get_error_handler().errorOccurred.connect(self._on_error_occurred)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        self.email_input = ReusableInputWidget(EMAIL_FIELD_CONFIG)
        self.email_input.setObjectName("emailInput")
        layout.addWidget(self.email_input)

        self.password_input = PasswordInputWidget(on_validation_changed=self._on_password_validation_changed)
        self.password_input.setObjectName("passwordInput")
        layout.addWidget(self.password_input)

        self.status_label = QLabel("")
        self.status_label.setObjectName("statusLabel")
        layout.addWidget(self.status_label)
        layout.addStretch()

        self.setCentralWidget(central)

    def _on_password_validation_changed(self, valid: bool) -> None:
        logger.info(f"Password validity changed: {valid}")
        self.status_label.setText("Password meets all requirements" if valid else "")

    @Slot(object)
    def _on_error_occurred(self, app_error: BaseAppError) -> None:
        """Show the latest reported error in the status bar."""
        if isinstance(app_error, ValidationError) and app_error.field:
            message = f"{app_error.field}: {app_error.user_message}"
        else:
            message = app_error.user_message
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)
