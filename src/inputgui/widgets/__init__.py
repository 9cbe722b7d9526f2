"""
Reusable input widgets.

This module contains the validated input field, the password field and
the rule checklist shown beneath it.
"""

from .password_input import PasswordInputWidget
from .reusable_input import ReusableInputWidget
from .rule_checklist import RuleChecklistWidget

__all__ = ["PasswordInputWidget", "ReusableInputWidget", "RuleChecklistWidget"]
