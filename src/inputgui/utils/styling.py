"""
Shared styling utilities for the input components.

Translates the toolkit-independent StyleToken into Qt stylesheets and
drop shadow effects, using one accessible color palette.
"""

from typing import Any, Protocol

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from inputcore.field_validator import BorderColor, StyleToken

FIELD_CORNER_RADIUS = 12


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """
    Centralized color palette with WCAG AA accessibility compliance.

    All text colors meet a contrast ratio of 4.5:1 on the default background.
    """

    # Validation border colors
    BORDER_NEUTRAL = "#6c757d"  # Neutral gray
    BORDER_ERROR = "#dc3545"  # Error state border
    BORDER_SUCCESS = "#198754"  # Success state border

    BACKGROUND_DEFAULT = "#ffffff"

    TEXT_PRIMARY = "#212529"
    TEXT_SECONDARY = "#6c757d"
    TEXT_ERROR = "#dc3545"
    TEXT_SUCCESS = "#198754"


BORDER_COLOR_MAP: dict[BorderColor, str] = {
    BorderColor.GRAY: AccessiblePalette.BORDER_NEUTRAL,
    BorderColor.RED: AccessiblePalette.BORDER_ERROR,
    BorderColor.GREEN: AccessiblePalette.BORDER_SUCCESS,
}


def get_border_color(color: BorderColor) -> str:
    """Get the hex color for a border color token."""
    return BORDER_COLOR_MAP.get(color, AccessiblePalette.BORDER_NEUTRAL)


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_input_frame_style(token: StyleToken) -> str:
        """Get the stylesheet for the frame around an input field."""
        # Qt stylesheets only accept whole pixel widths; halves round up
        width = max(0, int(token.border_width + 0.5))
        return f"""
            QFrame#inputFrame {{
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                border: {width}px solid {get_border_color(token.color)};
                border-radius: {FIELD_CORNER_RADIUS}px;
            }}
            QFrame#inputFrame QLineEdit {{
                border: none;
                background: transparent;
                color: {AccessiblePalette.TEXT_PRIMARY};
                padding: 8px;
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return f"color: {AccessiblePalette.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;"

    @staticmethod
    def get_error_label_style() -> str:
        return f"color: {AccessiblePalette.TEXT_ERROR}; font-size: 14px;"

    @staticmethod
    def get_rule_row_style(passed: bool) -> str:
        """Get the stylesheet for a rule checklist icon."""
        color = AccessiblePalette.TEXT_SUCCESS if passed else AccessiblePalette.TEXT_SECONDARY
        return f"color: {color}; font-size: 14px; font-weight: bold;"


def create_shadow_effect(token: StyleToken, parent: QWidget | None = None) -> QGraphicsDropShadowEffect | None:
    """
    Create a drop shadow for the token, or None when the token has no shadow.

    The shadow uses the border color with the token's opacity as alpha.
    """
    if token.shadow_radius <= 0 or token.shadow_opacity <= 0:
        return None

    color = QColor(get_border_color(token.color))
    color.setAlphaF(min(1.0, token.shadow_opacity))

    effect = QGraphicsDropShadowEffect(parent)
    effect.setBlurRadius(token.shadow_radius)
    effect.setOffset(0, 0)
    effect.setColor(color)
    return effect


def apply_style_token(widget: QWidget, token: StyleToken) -> None:
    """
    Apply a style token to an input frame.

    Args:
        widget: The frame wrapping the input
        token: Style derived from the validation state
    """
    widget.setStyleSheet(StyleSheets.get_input_frame_style(token))
    widget.setGraphicsEffect(create_shadow_effect(token, widget))

    # Force style refresh
    widget.style().unpolish(widget)
    widget.style().polish(widget)


def apply_rule_style(widget: StyleableWidget, passed: bool) -> None:
    """Apply pass/fail styling to a rule checklist icon."""
    widget.setStyleSheet(StyleSheets.get_rule_row_style(passed))
