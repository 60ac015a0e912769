"""
Declarative payload validation.

A rule is a ``(field, predicate, message)`` tuple. Every rule is evaluated in
declaration order and each failing one contributes its message, so a client
sees all problems with a payload at once.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from email_validator import EmailNotValidError, validate_email

Rule = tuple[str, Callable[[Any], bool], str]


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_email(value: Any) -> bool:
    # Absent values are reported by the presence rule, not here.
    if not is_present(value):
        return True
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def required(field: str) -> Rule:
    return (field, is_present, f'Please provide a value for "{field}"')


def valid_email(field: str) -> Rule:
    return (field, is_email, f'Please provide a valid email address for "{field}"')


USER_RULES: tuple[Rule, ...] = (
    required("firstName"),
    required("lastName"),
    required("emailAddress"),
    valid_email("emailAddress"),
    required("password"),
)

COURSE_RULES: tuple[Rule, ...] = (
    required("title"),
    required("description"),
)


def collect_errors(payload: dict, rules: Sequence[Rule]) -> list[str]:
    return [message for field, check, message in rules if not check(payload.get(field))]
