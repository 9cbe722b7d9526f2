"""
Error reporting and logging for the input widgets.

Widgets report fields that became invalid, and unhandled exceptions reach
the same handler through sys.excepthook. Both end up in a rotating log
file and on the errorOccurred signal, which the main window shows in its
status bar.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from inputcore.errors import BaseAppError, map_exception
from inputgui.app_config import get_log_dir

LOGGER_NAME = "inputgui.errors"
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 5_242_880  # 5MB
LOG_BACKUP_COUNT = 5

# Context keys containing one of these are never written out
SENSITIVE_KEYS = ("password", "secret", "token", "key")
MAX_CONTEXT_VALUE_LENGTH = 200


class ErrorHandler(QObject):
    """
    Process-wide sink for application errors.

    A single instance is shared by every widget so that all reports land
    in one log and one signal.
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        self._setup_logging()

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Log an exception at error level and emit it.

        SystemExit and KeyboardInterrupt are re-raised untouched.

        Returns:
            The exception normalized to a BaseAppError
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = map_exception(exception, context)
        app_error.context = self._sanitize_context(app_error.context)

        self._log(logging.ERROR, app_error, exc_info=exception if exception.__traceback__ else None)
        self.errorOccurred.emit(app_error)
        return app_error

    def report(self, app_error: BaseAppError) -> None:
        """
        Log an error that was created rather than raised, then emit it.

        Field feedback is expected during normal typing, so it is logged at
        debug level and stays out of the console.
        """
        app_error.context = self._sanitize_context(app_error.context)

        self._log(logging.DEBUG, app_error)
        self.errorOccurred.emit(app_error)

    def _log(self, level: int, app_error: BaseAppError, exc_info: BaseException | None = None) -> None:
        if self._logger is None:
            return

        self._logger.log(
            level,
            f"[{app_error.code.value}] {app_error.user_message}",
            extra={
                "app_code": app_error.code.value,
                "error_type": app_error.type.value,
                "severity": app_error.severity.value,
            },
            exc_info=exc_info,
        )

    def _setup_logging(self) -> None:
        """Attach a rotating file handler, plus a console handler in debug builds."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        ErrorHandler._logger = logger

        if logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        try:
            logs_dir = get_log_dir()
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                logs_dir / LOG_FILE_NAME,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            logging.getLogger(__name__).warning(f"Error log file unavailable: {e}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if __debug__:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            console_handler.setLevel(logging.WARNING)
            logger.addHandler(console_handler)

    @staticmethod
    def _sanitize_context(context: dict[str, Any]) -> dict[str, Any]:
        """Redact sensitive keys and shorten long values."""
        safe_context: dict[str, Any] = {}
        for key, value in context.items():
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                safe_context[key] = "[REDACTED]"
                continue

            text = value if isinstance(value, str) else repr(value)
            if len(text) > MAX_CONTEXT_VALUE_LENGTH:
                text = text[:MAX_CONTEXT_VALUE_LENGTH] + "..."
            safe_context[key] = text

        return safe_context

    def install_hooks(self) -> None:
        """Route unhandled exceptions through handle()."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return

            self.handle(exc_value, {"source": "sys.excepthook"})

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Get the shared ErrorHandler instance."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling for the application.

    Call once during application startup.
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: int = logging.INFO) -> None:
    """Initialize logging for the application modules."""
    get_error_handler()

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
