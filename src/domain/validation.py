"""
Signup validation - Declarative per-field rule table.

Each rule is a (field, predicate, error key) triple. Fields are evaluated
independently so every failing field is reported; within a single field the
first failing rule wins. The result preserves the declaration order of
fields (username, email, password).
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .models import SignupCandidate

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

# At least one lowercase, one uppercase and one digit
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).*$")


@dataclass(frozen=True)
class FieldRule:
    """A single validation rule for one candidate field."""

    field: str
    check: Callable[[Any], bool]
    error_key: str


def _not_null(value: Any) -> bool:
    return value is not None


def _length_between(minimum: int, maximum: int | None = None) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        if len(value) < minimum:
            return False
        return maximum is None or len(value) <= maximum

    return check


def _matches(pattern: re.Pattern[str]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return pattern.match(value) is not None

    return check


def _is_email(value: Any) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


SIGNUP_RULES: tuple[FieldRule, ...] = (
    FieldRule("username", _not_null, "username_null"),
    FieldRule("username", _length_between(USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH), "username_size"),
    FieldRule("email", _not_null, "email_null"),
    FieldRule("email", _is_email, "email_invalid"),
    FieldRule("password", _not_null, "password_null"),
    FieldRule("password", _length_between(PASSWORD_MIN_LENGTH), "password_size"),
    FieldRule("password", _matches(PASSWORD_PATTERN), "password_pattern"),
)


def validate_candidate(
    candidate: SignupCandidate, rules: tuple[FieldRule, ...] = SIGNUP_RULES
) -> dict[str, str]:
    """
    Validate a signup candidate against the rule table.

    Args:
        candidate: Raw signup input
        rules: Rule table, evaluated in order

    Returns:
        Mapping of field name to error key for every failing field,
        in rule declaration order. Empty when all fields pass.
    """
    errors: dict[str, str] = {}
    for rule in rules:
        if rule.field in errors:
            continue
        if not rule.check(getattr(candidate, rule.field)):
            errors[rule.field] = rule.error_key
    return errors
