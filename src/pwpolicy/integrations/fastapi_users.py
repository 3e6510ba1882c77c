from __future__ import annotations

import logging
from typing import Any, ClassVar

from fastapi_users.exceptions import InvalidPasswordException

from pwpolicy.security.validator import PolicyValidator

logger = logging.getLogger(__name__)


class PolicyPasswordMixin:
    """Plug a :class:`PolicyValidator` into ``fastapi_users.BaseUserManager``.

    Usage:
        class UserManager(PolicyPasswordMixin, UUIDIDMixin, BaseUserManager[User, UUID]):
            password_validator = setup_password_policy()

    The manager passes itself as the identity-store collaborator, so a custom
    base check can look things up through it.
    """

    password_validator: ClassVar[PolicyValidator] = PolicyValidator()

    async def validate_password(self, password: str, user: Any) -> None:
        outcome = await self.password_validator.validate(self, user, password)
        if outcome.succeeded:
            return
        logger.info(
            "Password rejected by policy: %s",
            ",".join(outcome.codes),
            extra={"user_id": getattr(user, "id", None), "violation_codes": outcome.codes},
        )
        raise InvalidPasswordException(reason=[v.description for v in outcome.violations])


__all__ = ["PolicyPasswordMixin"]
