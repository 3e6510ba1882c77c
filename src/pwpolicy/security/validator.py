from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from pwpolicy.exceptions import InvalidArgumentError
from pwpolicy.security.consecutive import run_exceeds
from pwpolicy.security.outcome import PolicyViolation, ValidationOutcome
from pwpolicy.security.passwords import DefaultPasswordCheck
from pwpolicy.security.policy import PolicyConfiguration

logger = logging.getLogger(__name__)

CONSECUTIVE_CHARS_CODE = "consecutive_chars"

RunScanner = Callable[[str, int], bool]


class BasePasswordCheck(Protocol):
    """Anything that can evaluate a password against a baseline rule set."""

    async def validate(self, manager: Any, user: Any, password: str) -> ValidationOutcome: ...


class PolicyValidator:
    """Runs the base check and the consecutive-run scan, reporting every violation at once.

    Both seams are injectable: ``base_check`` defaults to :class:`DefaultPasswordCheck`
    over the same configuration and ``scanner`` to :func:`run_exceeds`.
    The validator holds no mutable state; one instance can serve concurrent calls.
    """

    def __init__(
        self,
        configuration: PolicyConfiguration | None = None,
        *,
        base_check: BasePasswordCheck | None = None,
        scanner: RunScanner = run_exceeds,
    ):
        self.configuration = PolicyConfiguration() if configuration is None else configuration
        if base_check is None:
            base_check = DefaultPasswordCheck(self.configuration)
        self.base_check = base_check
        self.scanner = scanner

    async def validate(self, manager: Any, user: Any, password: str | None) -> ValidationOutcome:
        if manager is None:
            raise InvalidArgumentError("manager must not be None")
        if password is None:
            raise InvalidArgumentError("password must not be None")

        violations: list[PolicyViolation] = []

        base = await self.base_check.validate(manager, user, password)
        violations.extend(base.violations)

        limit = self.configuration.max_consecutive_identical_chars
        # The empty string is left to the base check's length rule
        if password and self.scanner(password, limit):
            violations.append(
                PolicyViolation(
                    CONSECUTIVE_CHARS_CODE,
                    f"Passwords must not repeat the same character more than {limit} "
                    "time(s) in a row.",
                )
            )

        outcome = ValidationOutcome.from_violations(violations)
        if not outcome.succeeded:
            logger.debug(
                "Password rejected: %s",
                ",".join(outcome.codes),
                extra={"violation_codes": outcome.codes},
            )
        return outcome


__all__ = ["BasePasswordCheck", "CONSECUTIVE_CHARS_CODE", "PolicyValidator", "RunScanner"]
