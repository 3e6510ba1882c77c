from .breach import HIBPChecker
from .consecutive import has_excessive_run, run_exceeds
from .outcome import PolicyViolation, ValidationOutcome
from .passwords import DefaultPasswordCheck, configure_breached_checker
from .policy import PolicyConfiguration
from .validator import BasePasswordCheck, PolicyValidator

__all__ = [
    "BasePasswordCheck",
    "DefaultPasswordCheck",
    "HIBPChecker",
    "PolicyConfiguration",
    "PolicyValidator",
    "PolicyViolation",
    "ValidationOutcome",
    "configure_breached_checker",
    "has_excessive_run",
    "run_exceeds",
]
