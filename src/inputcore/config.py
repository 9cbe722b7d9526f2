"""
Configuration for the reusable input components.

This module provides the configuration surface exposed to the presentation
layer, its JSON schema and defaults, and the translation from configuration
flags to a validation mode.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

import jsonschema

from .errors import ConfigError, ErrorCode
from .field_validator import (
    DEFAULT_EMAIL_ERROR_MESSAGE,
    EMAIL_PATTERN,
    BorderColor,
    EmailMode,
    PlainMode,
    RuleSetMode,
    StyleToken,
    ValidationMode,
)
from .rules import Rule

__all__ = [
    "BORDER_COLORS",
    "DEFAULT_EMAIL_ERROR_MESSAGE",
    "DEFAULT_FIELD_CONFIG",
    "EMAIL_PATTERN",
    "FIELD_CONFIG_JSON_SCHEMA",
    "InputFieldConfig",
]

BORDER_COLORS = ("gray", "red", "green")

DEFAULT_FIELD_CONFIG: dict[str, Any] = {
    "title": None,
    "placeholder": "",
    "is_secure": False,
    "show_toggle": False,
    "is_email": False,
    "error_message": None,
    "email_error_message": DEFAULT_EMAIL_ERROR_MESSAGE,
    # Static style, used as-is only when no validation is active
    "border_color": "gray",
    "border_width": 1.0,
    "border_shadow_radius": 0.0,
    "border_shadow_opacity": 0.0,
}

# JSON Schema for field configuration documents (draft-07)
FIELD_CONFIG_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Reusable input field configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": ["string", "null"]},
        "placeholder": {"type": "string"},
        "is_secure": {"type": "boolean"},
        "show_toggle": {"type": "boolean"},
        "is_email": {"type": "boolean"},
        "error_message": {"type": ["string", "null"]},
        "email_error_message": {"type": ["string", "null"]},
        "border_color": {"type": "string", "enum": list(BORDER_COLORS)},
        "border_width": {"type": "number", "minimum": 0},
        "border_shadow_radius": {"type": "number", "minimum": 0},
        "border_shadow_opacity": {"type": "number", "minimum": 0, "maximum": 1},
    },
}


@dataclass(frozen=True)
class InputFieldConfig:
    """
    Options recognized by an input field.

    `border_*` values are the static style of a field without validation.
    In the validating modes `border_width` and the shadow values are the
    defaults for the neutral and invalid states.
    """

    title: str | None = None
    placeholder: str = ""
    is_secure: bool = False
    show_toggle: bool = False
    is_email: bool = False
    error_message: str | None = None
    email_error_message: str | None = DEFAULT_EMAIL_ERROR_MESSAGE
    border_color: str = "gray"
    border_width: float = 1.0
    border_shadow_radius: float = 0.0
    border_shadow_opacity: float = 0.0

    def __post_init__(self) -> None:
        if self.border_color not in BORDER_COLORS:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Unknown border color '{self.border_color}'",
                technical_message=f"border_color must be one of {BORDER_COLORS}",
                context={"path": "border_color"},
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InputFieldConfig:
        """
        Build a configuration from a plain dictionary.

        Missing keys fall back to DEFAULT_FIELD_CONFIG.

        Raises:
            ConfigError: If the dictionary does not match the schema
        """
        try:
            jsonschema.validate(data, FIELD_CONFIG_JSON_SCHEMA)
        except jsonschema.ValidationError as e:
            path = "/".join(str(part) for part in e.absolute_path) or "<root>"
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Invalid field configuration at '{path}'",
                technical_message=e.message,
                context={"path": path},
            ) from e

        merged = {**DEFAULT_FIELD_CONFIG, **data}
        return cls(**merged)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def default_style(self) -> StyleToken:
        """Style from the static border options."""
        return StyleToken(
            color=BorderColor(self.border_color),
            border_width=self.border_width,
            shadow_radius=self.border_shadow_radius,
            shadow_opacity=self.border_shadow_opacity,
        )

    def build_mode(self, rules: Sequence[Rule] | None = None) -> ValidationMode:
        """
        Translate the configuration flags into a validation mode.

        Args:
            rules: Rule set for rule-set validation; takes precedence over is_email

        Returns:
            RuleSetMode, EmailMode or PlainMode
        """
        if rules is not None:
            return RuleSetMode(tuple(rules))
        if self.is_email:
            return EmailMode(error_message=self.email_error_message or DEFAULT_EMAIL_ERROR_MESSAGE)
        return PlainMode(self.default_style())

