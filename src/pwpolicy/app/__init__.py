from .logging import LoggingSettings, setup_logging
from .settings import PasswordPolicySettings, get_password_settings
from .setup import setup_password_policy

__all__ = [
    "setup_logging",
    "LoggingSettings",
    "PasswordPolicySettings",
    "get_password_settings",
    "setup_password_policy",
]
