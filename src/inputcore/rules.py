"""
Rule engine for input validation.

A rule is a named, pure predicate over a string. Rules are evaluated
independently; their order only matters for display.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .errors import ConfigError, ErrorCode


@dataclass(frozen=True)
class Rule:
    """
    A single named validation requirement.

    Attributes:
        message: Label shown next to the rule, treated as opaque text
        predicate: Pure function returning True when the value satisfies the rule
    """

    message: str
    predicate: Callable[[str], bool]

    def check(self, value: str) -> bool:
        """Return whether the value satisfies this rule."""
        return bool(self.predicate(value))

    @classmethod
    def matching(cls, message: str, pattern: str) -> Rule:
        """
        Create a rule that passes when the pattern matches anywhere in the value.

        The pattern is compiled immediately so a malformed pattern is
        reported when the rule is built, never while evaluating.

        Raises:
            ConfigError: If the pattern cannot be compiled
        """
        compiled = compile_pattern(pattern)
        return cls(message, lambda value: compiled.search(value) is not None)

    @classmethod
    def min_length(cls, message: str, length: int) -> Rule:
        """Create a rule that passes when the value has at least `length` characters."""
        if length < 0:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message="Minimum length cannot be negative",
                technical_message=f"Rule '{message}' configured with length {length}",
            )
        return cls(message, lambda value: len(value) >= length)


@dataclass(frozen=True)
class RuleResult:
    """Outcome of evaluating one rule against one value."""

    rule: Rule
    passed: bool

    @property
    def message(self) -> str:
        return self.rule.message


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a validation pattern, failing fast on malformed input.

    Raises:
        ConfigError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(
            code=ErrorCode.INVALID_PATTERN,
            user_message="Invalid validation pattern",
            technical_message=f"Cannot compile pattern {pattern!r}: {e}",
            context={"pattern": pattern},
        ) from e


def evaluate(rules: Iterable[Rule], value: str) -> tuple[RuleResult, ...]:
    """
    Evaluate every rule against the value.

    Args:
        rules: Rules in display order
        value: The string under validation

    Returns:
        One RuleResult per rule, in the same order as `rules`
    """
    return tuple(RuleResult(rule, rule.check(value)) for rule in rules)


def all_pass(results: Iterable[RuleResult]) -> bool:
    """Return True if every result passed. True for an empty sequence."""
    return all(result.passed for result in results)


# Default labels for the password requirements, in display order
PASSWORD_RULE_MESSAGES: tuple[str, str, str, str] = (
    "Minimum 8 characters",
    "At least one uppercase letter",
    "At least one digit",
    "At least one special character (? = # / %)",
)

PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = "?=#/%"


def password_rules(messages: Sequence[str] | None = None) -> tuple[Rule, ...]:
    """
    Build the four password rules.

    Args:
        messages: Optional replacement labels, one per rule in order

    Returns:
        Tuple of rules: length, uppercase, digit, special character

    Raises:
        ConfigError: If a label list of the wrong size is given
    """
    labels = tuple(messages) if messages is not None else PASSWORD_RULE_MESSAGES
    if len(labels) != len(PASSWORD_RULE_MESSAGES):
        raise ConfigError(
            code=ErrorCode.CONFIG_INVALID,
            user_message=f"Expected {len(PASSWORD_RULE_MESSAGES)} password rule messages",
            technical_message=f"Got {len(labels)} messages: {labels!r}",
        )

    return (
        Rule.min_length(labels[0], PASSWORD_MIN_LENGTH),
        Rule.matching(labels[1], r"[A-Z]"),
        Rule.matching(labels[2], r"\d"),
        Rule.matching(labels[3], "[" + re.escape(PASSWORD_SPECIAL_CHARACTERS) + "]"),
    )


PASSWORD_RULES: tuple[Rule, ...] = password_rules()
