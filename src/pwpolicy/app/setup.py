from __future__ import annotations

import logging

from pwpolicy.app.logging import LoggingSettings, setup_logging
from pwpolicy.app.settings import PasswordPolicySettings, get_password_settings
from pwpolicy.security.passwords import configure_breached_checker
from pwpolicy.security.validator import PolicyValidator

logger = logging.getLogger(__name__)


def setup_password_policy(
    settings: PasswordPolicySettings | None = None,
    *,
    configure_logging: bool = False,
    logging_settings: LoggingSettings | None = None,
) -> PolicyValidator:
    """Build the shared validator once at startup.

    Installs the HIBP breached-password checker when enabled; an already
    configured checker is left alone otherwise. Pass ``configure_logging=True``
    when the host has no logging setup of its own.
    """
    if configure_logging:
        setup_logging(logging_settings)
    if settings is None:
        settings = get_password_settings()
    policy = settings.to_policy()

    checker = settings.breached_checker()
    if checker is not None:
        configure_breached_checker(checker)
        logger.info("Breached-password lookups enabled (%s)", settings.hibp_base_url)

    logger.info(
        "Password policy: length %d-%d, max %d consecutive identical chars",
        policy.min_length,
        policy.max_length,
        policy.max_consecutive_identical_chars,
    )
    return PolicyValidator(policy)
