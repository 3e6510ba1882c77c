from __future__ import annotations

import inspect
import logging
import re
from typing import Any, Awaitable, Callable, Union

from pwpolicy.security.outcome import PolicyViolation, ValidationOutcome
from pwpolicy.security.policy import PolicyConfiguration

logger = logging.getLogger(__name__)

COMMON_PASSWORDS = {"password", "123456", "qwerty", "letmein", "admin"}

UPPER = re.compile(r"[A-Z]")
LOWER = re.compile(r"[a-z]")
DIGIT = re.compile(r"[0-9]")
SYMBOL = re.compile(r"[^A-Za-z0-9]")

BreachedChecker = Callable[[str], Union[bool, Awaitable[bool]]]

_breached_checker: BreachedChecker | None = None


def configure_breached_checker(checker: BreachedChecker | None) -> None:
    """Install (or clear, with ``None``) the process-wide breached-password checker."""
    global _breached_checker
    _breached_checker = checker


def get_breached_checker() -> BreachedChecker | None:
    return _breached_checker


def collect_violations(pw: str, policy: PolicyConfiguration) -> list[PolicyViolation]:
    """Evaluate every static rule of ``policy`` against ``pw``; never stops early."""
    violations: list[PolicyViolation] = []
    if len(pw) < policy.min_length:
        violations.append(
            PolicyViolation(
                "min_length", f"Passwords must be at least {policy.min_length} characters."
            )
        )
    if len(pw) > policy.max_length:
        violations.append(
            PolicyViolation(
                "max_length", f"Passwords must be at most {policy.max_length} characters."
            )
        )
    if policy.require_digit and not DIGIT.search(pw):
        violations.append(
            PolicyViolation("missing_digit", "Passwords must have at least one digit ('0'-'9').")
        )
    if policy.require_lowercase and not LOWER.search(pw):
        violations.append(
            PolicyViolation(
                "missing_lower", "Passwords must have at least one lowercase letter ('a'-'z')."
            )
        )
    if policy.require_uppercase and not UPPER.search(pw):
        violations.append(
            PolicyViolation(
                "missing_upper", "Passwords must have at least one uppercase letter ('A'-'Z')."
            )
        )
    if policy.require_symbol and not SYMBOL.search(pw):
        violations.append(
            PolicyViolation(
                "missing_symbol", "Passwords must have at least one non-alphanumeric character."
            )
        )
    if len(set(pw)) < policy.required_unique_chars:
        violations.append(
            PolicyViolation(
                "unique_chars",
                f"Passwords must use at least {policy.required_unique_chars} different characters.",
            )
        )
    if policy.forbid_common:
        lowered = pw.lower()
        # Whole-password match or a common password used as a substring
        if lowered in COMMON_PASSWORDS or any(term in lowered for term in COMMON_PASSWORDS):
            violations.append(
                PolicyViolation("common_password", "Passwords must not contain a common password.")
            )
    return violations


async def is_breached(pw: str) -> bool:
    checker = _breached_checker
    if checker is None:
        return False
    result = checker(pw)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


class DefaultPasswordCheck:
    """Baseline rule set an identity store applies before any extended rules.

    ``manager`` and ``user`` are accepted for interface compatibility and ignored.
    """

    def __init__(self, policy: PolicyConfiguration | None = None):
        self.policy = PolicyConfiguration() if policy is None else policy

    async def validate(self, manager: Any, user: Any, password: str) -> ValidationOutcome:
        violations = collect_violations(password, self.policy)
        if self.policy.forbid_breached:
            if _breached_checker is None:
                logger.debug("forbid_breached is set but no breached checker is configured")
            elif await is_breached(password):
                violations.append(
                    PolicyViolation(
                        "breached_password",
                        "Passwords must not appear in a known data breach.",
                    )
                )
        return ValidationOutcome.from_violations(violations)


__all__ = [
    "COMMON_PASSWORDS",
    "BreachedChecker",
    "DefaultPasswordCheck",
    "collect_violations",
    "configure_breached_checker",
    "get_breached_checker",
    "is_breached",
]
