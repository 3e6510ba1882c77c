from . import app, security

# Base exception
from .exceptions import (
    BreachLookupError,
    ConfigurationError,
    InvalidArgumentError,
    PasswordPolicyError,
    PasswordValidationError,
)

# Core
from .security import (
    BasePasswordCheck,
    DefaultPasswordCheck,
    PolicyConfiguration,
    PolicyValidator,
    PolicyViolation,
    ValidationOutcome,
    has_excessive_run,
)

__all__ = [
    # Modules
    "app",
    "security",
    # Exceptions
    "PasswordPolicyError",
    "ConfigurationError",
    "InvalidArgumentError",
    "BreachLookupError",
    "PasswordValidationError",
    # Core
    "BasePasswordCheck",
    "DefaultPasswordCheck",
    "PolicyConfiguration",
    "PolicyValidator",
    "PolicyViolation",
    "ValidationOutcome",
    "has_excessive_run",
]
