from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from pwpolicy.exceptions import PasswordValidationError


@dataclass(frozen=True)
class PolicyViolation:
    code: str
    description: str


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of one validation call. Violations keep insertion order."""

    violations: tuple[PolicyViolation, ...] = ()

    SUCCESS: ClassVar["ValidationOutcome"]

    @classmethod
    def failed(cls, *violations: PolicyViolation) -> "ValidationOutcome":
        return cls(tuple(violations))

    @classmethod
    def from_violations(cls, violations: Iterable[PolicyViolation]) -> "ValidationOutcome":
        collected = tuple(violations)
        return cls(collected) if collected else cls.SUCCESS

    @property
    def succeeded(self) -> bool:
        return not self.violations

    @property
    def codes(self) -> list[str]:
        return [v.code for v in self.violations]

    def raise_for_violations(self) -> None:
        if self.violations:
            raise PasswordValidationError(self.violations)


ValidationOutcome.SUCCESS = ValidationOutcome()


__all__ = ["PolicyViolation", "ValidationOutcome"]
