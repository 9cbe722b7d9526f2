"""
GUI-specific utilities for the input components.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    apply_rule_style,
    apply_style_token,
    create_shadow_effect,
    get_border_color,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_rule_style",
    "apply_style_token",
    "create_shadow_effect",
    "get_border_color",
]
