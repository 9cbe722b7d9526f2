"""
Tests for ErrorHandler.

Tests cover:
- Singleton pattern behavior
- Handling of raised exceptions and reporting of created errors
- Context sanitizing and exception hooks
"""

import logging
import sys
from unittest.mock import patch

import pytest

from inputcore.errors import BaseAppError, ConfigError, ErrorCode, ErrorType, create_validation_error
from inputgui.error_handler import LOGGER_NAME, ErrorHandler, get_error_handler, setup_error_handling


@pytest.fixture(autouse=True)
def _qapp(qapp):
    """Make sure a QApplication exists before the handler is created."""
    yield qapp


class TestErrorHandlerSingleton:
    """Test the singleton pattern implementation."""

    def test_singleton_pattern(self):
        """Test that ErrorHandler follows singleton pattern."""
        assert ErrorHandler() is ErrorHandler()

    def test_get_error_handler_returns_singleton(self):
        """Test that get_error_handler returns the singleton instance."""
        assert get_error_handler() is ErrorHandler()

    def test_initialization_only_once(self):
        """Test that logging is set up only once despite multiple instantiations."""
        ErrorHandler._instance = None

        with patch.object(ErrorHandler, "_setup_logging") as mock_setup:
            handler1 = ErrorHandler()
            handler2 = ErrorHandler()

            assert mock_setup.call_count == 1
            assert handler1 is handler2

        # Start the next tests from a fully initialized handler
        ErrorHandler._instance = None


class TestHandle:
    """Test handling of raised exceptions."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = ErrorHandler()

    def test_handle_maps_builtin_exception(self):
        """Test that built-in exceptions are normalized."""
        app_error = self.handler.handle(ValueError("Test error"))

        assert isinstance(app_error, BaseAppError)
        assert app_error.type == ErrorType.VALIDATION
        assert app_error.code == ErrorCode.INVALID_INPUT
        assert app_error.technical_message == "ValueError: Test error"

    def test_handle_emits_signal(self, qtbot):
        """Test that handled errors are emitted through errorOccurred."""
        error = ConfigError(ErrorCode.INVALID_PATTERN, "Invalid validation pattern")

        with qtbot.waitSignal(self.handler.errorOccurred, timeout=1000) as blocker:
            app_error = self.handler.handle(error)

        assert blocker.args == [app_error]
        assert app_error is error

    def test_handle_reraises_keyboard_interrupt(self):
        """Test that KeyboardInterrupt is not swallowed."""
        with pytest.raises(KeyboardInterrupt):
            self.handler.handle(KeyboardInterrupt())

    def test_handle_logs_at_error_with_code(self):
        """Test that the error code is passed to the logger."""
        with patch.object(ErrorHandler, "_logger") as mock_logger:
            self.handler.handle(ValueError("bad"))

        mock_logger.log.assert_called_once()
        args, kwargs = mock_logger.log.call_args
        assert args[0] == logging.ERROR
        assert kwargs["extra"]["app_code"] == "INVALID_INPUT"

    def test_handle_sanitizes_context(self):
        """Test that context passed with an exception is redacted."""
        app_error = self.handler.handle(ValueError("bad"), {"secret": "hidden", "source": "test"})

        assert app_error.context == {"secret": "[REDACTED]", "source": "test"}


class TestReport:
    """Test reporting of errors that were created rather than raised."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = ErrorHandler()

    def test_report_logs_at_debug(self):
        """Test that reported validation errors are logged at debug level."""
        error = create_validation_error("Email", "Invalid email", "a@b")

        with patch.object(ErrorHandler, "_logger") as mock_logger:
            self.handler.report(error)

        mock_logger.log.assert_called_once()
        assert mock_logger.log.call_args[0][0] == logging.DEBUG

    def test_report_emits_signal(self, qtbot):
        """Test that reported errors reach errorOccurred subscribers."""
        error = create_validation_error("Email", "Invalid email", "a@b")

        with qtbot.waitSignal(self.handler.errorOccurred, timeout=1000) as blocker:
            self.handler.report(error)

        assert blocker.args == [error]


class TestContextSanitizing:
    """Test context sanitizing."""

    def test_sensitive_keys_redacted(self):
        """Test that sensitive keys never reach the log."""
        safe = ErrorHandler._sanitize_context({"password": "Valid1?word", "api_token": "abc", "field": "Email"})

        assert safe["password"] == "[REDACTED]"
        assert safe["api_token"] == "[REDACTED]"
        assert safe["field"] == "Email"

    def test_long_values_truncated(self):
        """Test that long values are shortened."""
        safe = ErrorHandler._sanitize_context({"value": "x" * 500})

        assert safe["value"] == "x" * 200 + "..."

    def test_non_strings_become_repr(self):
        """Test that non-string values are stored as their repr."""
        safe = ErrorHandler._sanitize_context({"count": 3, "items": ["a"]})

        assert safe == {"count": "3", "items": "['a']"}


class TestHooks:
    """Test exception hook installation."""

    def test_install_and_restore(self):
        """Test that the excepthook is replaced and restored."""
        original = sys.excepthook
        handler = setup_error_handling()
        try:
            assert sys.excepthook is not original
        finally:
            handler.restore_hooks()

        assert sys.excepthook is original

    def test_hook_handles_exception(self):
        """Test that the installed hook routes exceptions to handle()."""
        handler = get_error_handler()
        handler.install_hooks()
        try:
            with patch.object(handler, "handle") as mock_handle:
                error = ValueError("unhandled")
                sys.excepthook(ValueError, error, None)
            mock_handle.assert_called_once_with(error, {"source": "sys.excepthook"})
        finally:
            handler.restore_hooks()

    def test_hook_passes_base_exceptions_through(self):
        """Test that non-Exception errors go to the original hook."""
        handler = get_error_handler()
        handler.install_hooks()
        try:
            with (
                patch.object(handler, "_original_excepthook") as mock_original,
                patch.object(handler, "handle") as mock_handle,
            ):
                error = KeyboardInterrupt()
                sys.excepthook(KeyboardInterrupt, error, None)
        finally:
            handler.restore_hooks()

        mock_handle.assert_not_called()
        mock_original.assert_called_once_with(KeyboardInterrupt, error, None)


def test_logger_does_not_propagate():
    """Test that the error logger keeps its records to its own handlers."""
    get_error_handler()

    assert logging.getLogger(LOGGER_NAME).propagate is False
