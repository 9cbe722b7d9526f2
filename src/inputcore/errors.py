"""
Error taxonomy for the reusable input components.

Evaluation itself never fails: every string maps to a validation state.
The errors here cover construction-time configuration problems and the
reporting of fields that became invalid.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories."""

    VALIDATION = "validation"
    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes."""

    # Field feedback
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    RULE_FAILED = "RULE_FAILED"

    # Raised while building rules, modes and field configurations
    INVALID_PATTERN = "INVALID_PATTERN"
    CONFIG_INVALID = "CONFIG_INVALID"

    OS_ERROR = "OS_ERROR"
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    The category is fixed per subclass. `user_message` is what a widget may
    show; `technical_message` and `context` are for the log only.
    """

    type: ClassVar[ErrorType] = ErrorType.SYSTEM

    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type.value}, code={self.code.value}, message='{self.user_message}')"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "context": self.context,
        }


@dataclass(repr=False)
class ValidationError(BaseAppError):
    """A field value that does not satisfy its validation mode."""

    type: ClassVar[ErrorType] = ErrorType.VALIDATION

    severity: ErrorSeverity = ErrorSeverity.LOW

    @property
    def field(self) -> str | None:
        """Name of the field that failed validation."""
        return self.context.get("field")


@dataclass(repr=False)
class ConfigError(BaseAppError):
    """Invalid component configuration, raised at construction time."""

    type: ClassVar[ErrorType] = ErrorType.CONFIG

    severity: ErrorSeverity = ErrorSeverity.HIGH


@dataclass(repr=False)
class UnexpectedError(BaseAppError):
    """Environment failures and exceptions nothing else accounts for."""

    severity: ErrorSeverity = ErrorSeverity.HIGH


# Checked in order, so subclasses must come before their bases
_EXCEPTION_MAPPING: list[tuple[type[Exception], type[BaseAppError], ErrorCode, str]] = [
    (re.error, ConfigError, ErrorCode.INVALID_PATTERN, "Invalid validation pattern"),
    (ValueError, ValidationError, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    (OSError, UnexpectedError, ErrorCode.OS_ERROR, "System error occurred"),
]


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to an application error.

    Application errors pass through unchanged. Pattern errors keep a fixed
    user message since the regex engine's wording is not meant for users.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    if isinstance(exc, BaseAppError):
        return exc

    technical_message = f"{type(exc).__name__}: {exc}"

    for mapped_type, error_class, error_code, default_message in _EXCEPTION_MAPPING:
        if isinstance(exc, mapped_type):
            user_message = default_message if error_class is ConfigError else str(exc) or default_message
            return error_class(
                code=error_code,
                user_message=user_message,
                technical_message=technical_message,
                context=context or {},
            )

    logger.warning(f"Unknown exception type: {technical_message}")
    return UnexpectedError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=technical_message,
        context=context or {},
    )


def create_validation_error(field: str, message: str, value: Any = None) -> ValidationError:
    """
    Create a ValidationError for a field that became invalid.

    Args:
        field: Field name that failed validation
        message: Validation error message
        value: The invalid value, omitted from the context when None

    Returns:
        ValidationError instance
    """
    code = ErrorCode.INVALID_INPUT

    lowered = message.lower()
    if "email" in lowered or "format" in lowered:
        code = ErrorCode.INVALID_FORMAT
    elif "rule" in lowered or "at least" in lowered or "minimum" in lowered:
        code = ErrorCode.RULE_FAILED

    context: dict[str, Any] = {"field": field}
    if value is not None:
        context["value"] = value

    return ValidationError(
        code=code,
        user_message=message,
        technical_message=f"Validation failed for field '{field}': {message}",
        context=context,
    )
