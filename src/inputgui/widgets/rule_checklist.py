"""
Checklist widget showing which rules the current value satisfies.
"""

from collections.abc import Sequence

from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from inputcore.rules import Rule, RuleResult
from inputgui.utils.styling import StyleSheets, apply_rule_style

PASSED_ICON = "✔"  # heavy check mark
PENDING_ICON = "○"  # white circle


class RuleChecklistWidget(QWidget):
    """
    One row per rule, in declaration order.

    A satisfied rule shows a green check mark, an unmet one a gray circle.
    """

    def __init__(self, rules: Sequence[Rule], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rules = tuple(rules)
        self._icons: list[QLabel] = []
        self._labels: list[QLabel] = []
        self._passed: list[bool] = [False] * len(self._rules)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setObjectName("ruleChecklist")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        for rule in self._rules:
            row = QHBoxLayout()
            row.setSpacing(8)

            icon = QLabel(PENDING_ICON)
            icon.setFixedWidth(16)
            apply_rule_style(icon, False)
            row.addWidget(icon)

            label = QLabel(rule.message)
            label.setStyleSheet(StyleSheets.get_title_style())
            row.addWidget(label)
            row.addStretch()

            layout.addLayout(row)
            self._icons.append(icon)
            self._labels.append(label)

    def update_results(self, results: Sequence[RuleResult]) -> None:
        """
        Show the outcome of the latest evaluation.

        Args:
            results: One result per rule, in the same order as the rules
        """
        for index, result in enumerate(results[: len(self._icons)]):
            if self._passed[index] == result.passed:
                continue

            self._passed[index] = result.passed
            icon = self._icons[index]
            icon.setText(PASSED_ICON if result.passed else PENDING_ICON)
            apply_rule_style(icon, result.passed)

    def passed_states(self) -> list[bool]:
        """Get the displayed pass state of every rule."""
        return list(self._passed)

    def messages(self) -> list[str]:
        """Get the displayed rule messages."""
        return [label.text() for label in self._labels]
