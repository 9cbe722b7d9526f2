"""
Shared test configuration.

Qt runs on the offscreen platform so the widget tests work on headless
systems, and QStandardPaths is switched to test mode so the error
handler's log file never lands in the real user directories.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QStandardPaths  # noqa: E402

QStandardPaths.setTestModeEnabled(True)
