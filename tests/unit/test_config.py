"""
Tests for the field configuration surface.
"""

import pytest

from inputcore.config import (
    DEFAULT_EMAIL_ERROR_MESSAGE,
    DEFAULT_FIELD_CONFIG,
    EMAIL_PATTERN,
    InputFieldConfig,
)
from inputcore.errors import ConfigError, ErrorCode
from inputcore.field_validator import BorderColor, EmailMode, PlainMode, RuleSetMode, StyleToken
from inputcore.rules import PASSWORD_RULES


class TestInputFieldConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test that the dataclass defaults match DEFAULT_FIELD_CONFIG."""
        assert InputFieldConfig().to_dict() == DEFAULT_FIELD_CONFIG

    def test_email_literals(self):
        """Test the email pattern and default message literals."""
        assert EMAIL_PATTERN == r"^\S+@\S+\.\S+$"
        assert DEFAULT_EMAIL_ERROR_MESSAGE == "Invalid email"

    def test_default_style(self):
        """Test the style built from the static border options."""
        config = InputFieldConfig(border_color="red", border_width=3, border_shadow_radius=4, border_shadow_opacity=0.5)

        assert config.default_style() == StyleToken(BorderColor.RED, 3, 4, 0.5)

    def test_unknown_border_color(self):
        """Test that an unknown color name is rejected at construction."""
        with pytest.raises(ConfigError) as exc_info:
            InputFieldConfig(border_color="blue")

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID


class TestBuildMode:
    """Test the translation of flags into a validation mode."""

    def test_plain_mode(self):
        """Test that no flags produce plain mode with the static style."""
        mode = InputFieldConfig(border_width=2).build_mode()

        assert isinstance(mode, PlainMode)
        assert mode.style.border_width == 2

    def test_email_mode(self):
        """Test that is_email produces email mode with the configured message."""
        mode = InputFieldConfig(is_email=True, email_error_message="Bad address").build_mode()

        assert isinstance(mode, EmailMode)
        assert mode.error_message == "Bad address"

    def test_email_mode_without_message(self):
        """Test that a missing email message falls back to the default."""
        mode = InputFieldConfig(is_email=True, email_error_message=None).build_mode()

        assert mode.error_message == DEFAULT_EMAIL_ERROR_MESSAGE

    def test_rules_take_precedence(self):
        """Test that a rule set wins over the email flag."""
        mode = InputFieldConfig(is_email=True).build_mode(PASSWORD_RULES)

        assert isinstance(mode, RuleSetMode)
        assert mode.rules == PASSWORD_RULES


class TestFromDict:
    """Test schema-checked construction from dictionaries."""

    def test_partial_dict_uses_defaults(self):
        """Test that missing keys fall back to defaults."""
        config = InputFieldConfig.from_dict({"title": "Email", "is_email": True})

        assert config.title == "Email"
        assert config.is_email is True
        assert config.placeholder == ""
        assert config.email_error_message == DEFAULT_EMAIL_ERROR_MESSAGE

    def test_full_dict(self):
        """Test a complete configuration document."""
        data = dict(DEFAULT_FIELD_CONFIG, title="Heslo", is_secure=True, show_toggle=True)

        assert InputFieldConfig.from_dict(data).to_dict() == data

    @pytest.mark.parametrize(
        "data,path",
        [
            ({"is_email": "yes"}, "is_email"),
            ({"border_width": -1}, "border_width"),
            ({"border_shadow_opacity": 1.5}, "border_shadow_opacity"),
            ({"border_color": "purple"}, "border_color"),
        ],
    )
    def test_invalid_values(self, data, path):
        """Test that schema violations raise ConfigError with the offending path."""
        with pytest.raises(ConfigError) as exc_info:
            InputFieldConfig.from_dict(data)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.context["path"] == path

    def test_unknown_key(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            InputFieldConfig.from_dict({"keyboard": "email"})

        assert exc_info.value.context["path"] == "<root>"
