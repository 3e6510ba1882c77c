from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from pwpolicy.security.outcome import PolicyViolation


class PasswordPolicyError(Exception):
    """Base exception for all pwpolicy errors."""

    pass


class ConfigurationError(PasswordPolicyError, ValueError):
    """Raised when a policy is built from inconsistent thresholds."""

    pass


class InvalidArgumentError(PasswordPolicyError, ValueError):
    """Raised when a caller breaks an argument contract (absent manager, absent password)."""

    pass


class BreachLookupError(PasswordPolicyError):
    """Raised when a breached-password lookup returns a response that cannot be trusted."""

    pass


class PasswordValidationError(PasswordPolicyError):
    """Raised by hosts that turn a failed outcome into control flow."""

    def __init__(self, violations: Iterable[PolicyViolation]):
        super().__init__("Password validation failed")
        self.violations = list(violations)

    @property
    def reasons(self) -> list[str]:
        return [v.code for v in self.violations]


__all__ = [
    "PasswordPolicyError",
    "ConfigurationError",
    "InvalidArgumentError",
    "BreachLookupError",
    "PasswordValidationError",
]
