"""
Application identity and directories for the demo application.
"""

from pathlib import Path

from PySide6.QtCore import QCoreApplication, QStandardPaths

APP_ORGANIZATION = "ReusableInputs"
APP_NAME = "InputComponents"


def get_log_dir() -> Path:
    """
    Get the directory for log files.

    Uses the application data location, falling back to the configuration
    location when the platform reports no data location.
    """
    data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if data_location:
        return Path(data_location) / "logs"

    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME / "logs"


def setup_qsettings() -> None:
    """
    Configure Qt with the application identifiers.

    Call early in application startup so QStandardPaths resolves the
    application's own directories.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
