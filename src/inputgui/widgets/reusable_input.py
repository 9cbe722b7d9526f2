"""
Reusable text/secure input widget with validation-driven border styling.

The widget owns no validation logic of its own: every edit is passed to a
FieldValidator and the resulting style token, error message and validity
are rendered as-is.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QLineEdit, QToolButton, QVBoxLayout, QWidget

from inputcore.config import InputFieldConfig
from inputgui.error_handler import get_error_handler
from inputcore.errors import create_validation_error
from inputcore.field_validator import FieldResult, FieldValidator, StyleToken
from inputcore.rules import Rule
from inputgui.utils.styling import StyleSheets, apply_style_token


class ReusableInputWidget(QWidget):
    """
    Input field with optional title, password toggle and validation feedback.

    The validation mode follows the configuration: a rule set when `rules`
    is given, email validation when `config.is_email` is set, otherwise a
    static border style.
    """

    # Signals
    valueChanged = Signal(str)  # new text
    validityChanged = Signal(bool)  # emitted only when validity flips (rule-set mode)
    styleChanged = Signal(object)  # StyleToken

    def __init__(
        self,
        config: InputFieldConfig | Mapping[str, Any] | None = None,
        rules: Sequence[Rule] | None = None,
        on_validity_changed: Callable[[bool], None] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the input widget.

        Args:
            config: Field options, or a plain mapping checked against the field
                configuration schema; defaults to a plain unvalidated field
            rules: Rule set to validate against
            on_validity_changed: Connected to validityChanged
            parent: Parent widget

        Raises:
            ConfigError: If a mapping config does not match the schema
        """
        super().__init__(parent)
        if isinstance(config, Mapping):
            config = InputFieldConfig.from_dict(dict(config))
        self._config = config or InputFieldConfig()
        self._password_visible = False
        self._error_handler = get_error_handler()

        self._validator = FieldValidator(
            self._config.build_mode(rules),
            on_validity_changed=self.validityChanged.emit,
            defaults=self._config.default_style(),
        )
        self._current_style: StyleToken | None = None

        if on_validity_changed is not None:
            self.validityChanged.connect(on_validity_changed)

        self._setup_ui()
        self._apply_result(self._validator.result())

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.title_label: QLabel | None = None
        if self._config.title is not None:
            self.title_label = QLabel(self._config.title)
            self.title_label.setObjectName("inputTitle")
            self.title_label.setStyleSheet(StyleSheets.get_title_style())
            layout.addWidget(self.title_label)

        self.input_frame = QFrame()
        self.input_frame.setObjectName("inputFrame")
        frame_layout = QHBoxLayout(self.input_frame)
        frame_layout.setContentsMargins(4, 4, 12, 4)
        frame_layout.setSpacing(0)

        self.line_edit = QLineEdit()
        self.line_edit.setObjectName("inputLineEdit")
        self.line_edit.setPlaceholderText(self._config.placeholder)
        if self._config.is_secure:
            self.line_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.line_edit.textChanged.connect(self._on_text_changed)
        frame_layout.addWidget(self.line_edit)

        self.toggle_button: QToolButton | None = None
        if self._config.is_secure and self._config.show_toggle:
            self.toggle_button = QToolButton()
            self.toggle_button.setObjectName("btnTogglePassword")
            self.toggle_button.setAutoRaise(True)
            self.toggle_button.clicked.connect(self.toggle_password_visibility)
            frame_layout.addWidget(self.toggle_button)
            self._update_toggle_button()

        layout.addWidget(self.input_frame)

        self.error_label: QLabel | None = None
        if self._config.error_message is not None:
            self.error_label = QLabel(self._config.error_message)
            self.error_label.setObjectName("inputError")
            self.error_label.setStyleSheet(StyleSheets.get_error_label_style())
            layout.addWidget(self.error_label)

        self.email_error_label = QLabel()
        self.email_error_label.setObjectName("emailError")
        self.email_error_label.setStyleSheet(StyleSheets.get_error_label_style())
        self.email_error_label.setVisible(False)
        layout.addWidget(self.email_error_label)

    def _on_text_changed(self, text: str) -> None:
        """Evaluate the new text and render the result."""
        result = self._validator.on_value_changed(text)
        self._apply_result(result)
        self.valueChanged.emit(text)

        if result.did_validity_change and not result.valid and result.value:
            self._report_invalid(result)

    def _apply_result(self, result: FieldResult) -> None:
        """Render a validation result."""
        if result.style != self._current_style:
            self._current_style = result.style
            apply_style_token(self.input_frame, result.style)
            self.styleChanged.emit(result.style)

        if result.error_message is not None:
            self.email_error_label.setText(result.error_message)
            self.email_error_label.setVisible(True)
        else:
            self.email_error_label.setVisible(False)

    def _report_invalid(self, result: FieldResult) -> None:
        """Log a field that just became invalid. Secure values are never logged."""
        if result.error_message is not None:
            message = result.error_message
        else:
            failed = [rule_result.message for rule_result in result.rule_results if not rule_result.passed]
            message = "Unmet rules: " + ", ".join(failed)

        field_name = self._config.title or self.objectName() or "input"
        value = None if self._config.is_secure else result.value
        self._error_handler.report(create_validation_error(field_name, message, value))

    def _update_toggle_button(self) -> None:
        if self.toggle_button is None:
            return
        self.toggle_button.setText("Hide" if self._password_visible else "Show")
        self.toggle_button.setToolTip("Hide password" if self._password_visible else "Show password")

    def toggle_password_visibility(self) -> None:
        """Switch a secure field between masked and plain text."""
        if not self._config.is_secure:
            return

        self._password_visible = not self._password_visible
        mode = QLineEdit.EchoMode.Normal if self._password_visible else QLineEdit.EchoMode.Password
        self.line_edit.setEchoMode(mode)
        self._update_toggle_button()

    def is_password_visible(self) -> bool:
        return self._password_visible

    def text(self) -> str:
        """Get the current value."""
        return self._validator.value

    def set_text(self, text: str) -> None:
        """Replace the current value; validation runs as if typed."""
        self.line_edit.setText(text)

    def result(self) -> FieldResult:
        """Get the validation result for the current value."""
        return self._validator.result()

    def style_token(self) -> StyleToken:
        return self._validator.style

    def is_valid(self) -> bool:
        return self._validator.is_valid

    @property
    def config(self) -> InputFieldConfig:
        return self._config

    @property
    def field_validator(self) -> FieldValidator:
        return self._validator
