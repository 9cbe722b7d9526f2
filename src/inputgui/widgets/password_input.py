"""
Password input widget with a live rule checklist.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QVBoxLayout, QWidget

from inputcore.config import InputFieldConfig
from inputcore.rules import PASSWORD_RULES, Rule
from inputgui.widgets.reusable_input import ReusableInputWidget
from inputgui.widgets.rule_checklist import RuleChecklistWidget


class PasswordInputWidget(QWidget):
    """
    Secure input with a show/hide toggle and one checklist row per rule.

    The border turns green with a soft shadow once every rule passes.
    validationChanged fires only when overall validity flips.
    """

    validationChanged = Signal(bool)

    def __init__(
        self,
        on_validation_changed: Callable[[bool], None] | None = None,
        rules: Sequence[Rule] = PASSWORD_RULES,
        title: str | None = "Password",
        placeholder: str = "Enter password",
        parent: QWidget | None = None,
    ) -> None:
        """
        Initialize the password widget.

        Args:
            on_validation_changed: Connected to validationChanged
            rules: Password rules in display order
            title: Title shown above the field
            placeholder: Placeholder text
            parent: Parent widget
        """
        super().__init__(parent)
        self._rules = tuple(rules)

        config = InputFieldConfig(title=title, placeholder=placeholder, is_secure=True, show_toggle=True)
        self.input = ReusableInputWidget(config, rules=self._rules)
        self.checklist = RuleChecklistWidget(self._rules)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        layout.addWidget(self.input)
        layout.addWidget(self.checklist)

        self.input.valueChanged.connect(self._on_value_changed)
        self.input.validityChanged.connect(self.validationChanged.emit)
        if on_validation_changed is not None:
            self.validationChanged.connect(on_validation_changed)

        self.checklist.update_results(self.input.result().rule_results)

    def _on_value_changed(self, _text: str) -> None:
        self.checklist.update_results(self.input.result().rule_results)

    def password(self) -> str:
        return self.input.text()

    def set_password(self, password: str) -> None:
        self.input.set_text(password)

    def is_valid(self) -> bool:
        return self.input.is_valid()
