"""
Field validation and style derivation.

A FieldValidator binds one input value to a validation mode and derives
the border style that the presentation layer renders. Evaluation happens
inline whenever the caller reports a new value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from .rules import PASSWORD_RULES, Rule, RuleResult, all_pass, compile_pattern, evaluate

logger = logging.getLogger(__name__)

# Anchored at both ends; whitespace breaks any of the three tokens.
# Matched with fullmatch, so a trailing newline is rejected as well.
EMAIL_PATTERN = r"^\S+@\S+\.\S+$"

DEFAULT_EMAIL_ERROR_MESSAGE = "Invalid email"


class ValidationState(Enum):
    """Visual validation state of a field."""

    NEUTRAL = "neutral"
    INVALID = "invalid"
    VALID = "valid"


class BorderColor(Enum):
    """Border color tokens. The presentation layer maps them to concrete colors."""

    GRAY = "gray"
    RED = "red"
    GREEN = "green"


STATE_COLORS: dict[ValidationState, BorderColor] = {
    ValidationState.NEUTRAL: BorderColor.GRAY,
    ValidationState.INVALID: BorderColor.RED,
    ValidationState.VALID: BorderColor.GREEN,
}

VALID_BORDER_WIDTH = 2.0
VALID_SHADOW_RADIUS = 6.0
VALID_SHADOW_OPACITY = 0.3


@dataclass(frozen=True)
class StyleToken:
    """Border style derived from the validation state."""

    color: BorderColor = BorderColor.GRAY
    border_width: float = 1.0
    shadow_radius: float = 0.0
    shadow_opacity: float = 0.0


def derive_style(state: ValidationState, defaults: StyleToken | None = None) -> StyleToken:
    """
    Map a validation state to its style token.

    The valid state always gets the emphasized border and shadow; the other
    states keep the caller's default width and shadow.

    Args:
        state: Current validation state
        defaults: Caller defaults for the non-valid states

    Returns:
        StyleToken for the state
    """
    defaults = defaults or StyleToken()
    color = STATE_COLORS[state]

    if state == ValidationState.VALID:
        return StyleToken(color, VALID_BORDER_WIDTH, VALID_SHADOW_RADIUS, VALID_SHADOW_OPACITY)

    return StyleToken(color, defaults.border_width, defaults.shadow_radius, defaults.shadow_opacity)


@dataclass(frozen=True)
class PlainMode:
    """No validation: always valid, with a fixed caller-supplied style."""

    style: StyleToken = field(default_factory=StyleToken)


@dataclass(frozen=True)
class EmailMode:
    """Single-pattern validation for email addresses."""

    error_message: str = DEFAULT_EMAIL_ERROR_MESSAGE
    pattern: str = EMAIL_PATTERN
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", compile_pattern(self.pattern))

    def matches(self, value: str) -> bool:
        return self._compiled.fullmatch(value) is not None


@dataclass(frozen=True)
class RuleSetMode:
    """Validation against every rule of a rule set."""

    rules: tuple[Rule, ...] = PASSWORD_RULES

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))


ValidationMode = PlainMode | EmailMode | RuleSetMode


@dataclass(frozen=True)
class FieldResult:
    """
    Everything the presentation layer needs after an evaluation.

    Attributes:
        value: The evaluated value
        state: Neutral, invalid or valid
        valid: Aggregate validity for the mode
        style: Border style to render
        rule_results: Per-rule outcomes in display order (rule-set mode only)
        error_message: Message to display, set only for a non-empty invalid email
        did_validity_change: Whether `valid` differs from the previous evaluation
    """

    value: str
    state: ValidationState
    valid: bool
    style: StyleToken
    rule_results: tuple[RuleResult, ...] = ()
    error_message: str | None = None
    did_validity_change: bool = False


def _evaluate_plain(mode: PlainMode, value: str) -> FieldResult:
    return FieldResult(value=value, state=ValidationState.NEUTRAL, valid=True, style=mode.style)


def _evaluate_email(mode: EmailMode, value: str, defaults: StyleToken) -> FieldResult:
    # An empty field has not been judged yet
    if not value:
        state = ValidationState.NEUTRAL
        return FieldResult(value=value, state=state, valid=True, style=derive_style(state, defaults))

    if mode.matches(value):
        state = ValidationState.VALID
        return FieldResult(value=value, state=state, valid=True, style=derive_style(state, defaults))

    return FieldResult(
        value=value,
        state=ValidationState.INVALID,
        valid=False,
        style=derive_style(ValidationState.INVALID, defaults),
        error_message=mode.error_message,
    )


def _evaluate_rule_set(mode: RuleSetMode, value: str, defaults: StyleToken) -> FieldResult:
    results = evaluate(mode.rules, value)
    valid = all_pass(results)

    if not value:
        state = ValidationState.NEUTRAL
    else:
        state = ValidationState.VALID if valid else ValidationState.INVALID

    return FieldResult(value=value, state=state, valid=valid, style=derive_style(state, defaults), rule_results=results)


def evaluate_field(mode: ValidationMode, value: str, defaults: StyleToken | None = None) -> FieldResult:
    """
    Evaluate a value under a validation mode.

    Args:
        mode: The validation mode
        value: Current field value
        defaults: Caller default style for the non-valid states

    Returns:
        FieldResult with `did_validity_change` left False
    """
    defaults = defaults or StyleToken()

    if isinstance(mode, PlainMode):
        return _evaluate_plain(mode, value)
    if isinstance(mode, EmailMode):
        return _evaluate_email(mode, value, defaults)
    if isinstance(mode, RuleSetMode):
        return _evaluate_rule_set(mode, value, defaults)

    raise TypeError(f"Unsupported validation mode: {type(mode).__name__}")


class FieldValidator:
    """
    Validation state for a single input field.

    The caller owns the value and reports every change through
    on_value_changed(). Derived state is recomputed on each read; only the
    last aggregate validity is remembered so that the validity callback
    fires on transitions rather than on every edit.
    """

    def __init__(
        self,
        mode: ValidationMode,
        on_validity_changed: Callable[[bool], None] | None = None,
        defaults: StyleToken | None = None,
        value: str = "",
    ):
        """
        Initialize the field validator.

        Args:
            mode: Plain, email or rule-set validation mode
            on_validity_changed: Called with the new validity when it flips (rule-set mode)
            defaults: Default style for the neutral and invalid states
            value: Initial value, evaluated without notifying
        """
        self.mode = mode
        self.on_validity_changed = on_validity_changed
        self.defaults = defaults or StyleToken()
        self._value = value
        self._last_valid = self.result().valid

    @property
    def value(self) -> str:
        return self._value

    def result(self) -> FieldResult:
        """Evaluate the current value."""
        return evaluate_field(self.mode, self._value, self.defaults)

    @property
    def state(self) -> ValidationState:
        return self.result().state

    @property
    def style(self) -> StyleToken:
        return self.result().style

    @property
    def is_valid(self) -> bool:
        return self.result().valid

    @property
    def rule_results(self) -> tuple[RuleResult, ...]:
        return self.result().rule_results

    @property
    def error_message(self) -> str | None:
        return self.result().error_message

    def on_value_changed(self, new_value: str) -> FieldResult:
        """
        Re-evaluate after the caller changed the value.

        In rule-set mode the validity callback is invoked once, before this
        method returns, when the aggregate validity flipped.

        Args:
            new_value: The new field value

        Returns:
            FieldResult for the new value
        """
        self._value = new_value
        result = self.result()

        changed = result.valid != self._last_valid
        self._last_valid = result.valid

        if changed:
            result = replace(result, did_validity_change=True)
            logger.debug(f"Field validity changed to {result.valid} ({result.state.value})")

            if isinstance(self.mode, RuleSetMode) and self.on_validity_changed is not None:
                self.on_validity_changed(result.valid)

        return result

    @classmethod
    def for_rules(
        cls,
        rules: Sequence[Rule] = PASSWORD_RULES,
        on_validity_changed: Callable[[bool], None] | None = None,
        defaults: StyleToken | None = None,
    ) -> FieldValidator:
        """Create a validator in rule-set mode."""
        return cls(RuleSetMode(tuple(rules)), on_validity_changed, defaults)
