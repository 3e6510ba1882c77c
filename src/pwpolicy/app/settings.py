from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwpolicy.security.breach import HIBP_BASE_URL, HIBPChecker
from pwpolicy.security.policy import PolicyConfiguration


class PasswordPolicySettings(BaseSettings):
    # flat = easy env overrides (PASSWORD_MIN_LENGTH, PASSWORD_REQUIRE_SYMBOL, ...)
    min_length: int = 12
    max_length: int = 255
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_symbol: bool = True
    max_consecutive_identical_chars: int = 2
    required_unique_chars: int = 1
    forbid_common: bool = True
    forbid_breached: bool = False

    # Have I Been Pwned range lookup; only used when forbid_breached is on
    hibp_enabled: bool = False
    hibp_base_url: str = HIBP_BASE_URL
    hibp_timeout_seconds: float = Field(default=5.0, gt=0)
    hibp_min_count: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(env_prefix="PASSWORD_", env_file=".env", extra="ignore")

    def to_policy(self) -> PolicyConfiguration:
        """Freeze the thresholds; raises ConfigurationError on inconsistent values."""
        return PolicyConfiguration(
            min_length=self.min_length,
            max_length=self.max_length,
            require_digit=self.require_digit,
            require_lowercase=self.require_lowercase,
            require_uppercase=self.require_uppercase,
            require_symbol=self.require_symbol,
            max_consecutive_identical_chars=self.max_consecutive_identical_chars,
            required_unique_chars=self.required_unique_chars,
            forbid_common=self.forbid_common,
            forbid_breached=self.forbid_breached,
        )

    def breached_checker(self) -> HIBPChecker | None:
        if not (self.forbid_breached and self.hibp_enabled):
            return None
        return HIBPChecker(
            base_url=self.hibp_base_url,
            timeout_seconds=self.hibp_timeout_seconds,
            min_count=self.hibp_min_count,
        )


@lru_cache
def get_password_settings(**kwargs) -> PasswordPolicySettings:
    # Only include kwargs that are not None, so defaults in PasswordPolicySettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return PasswordPolicySettings(**filtered_kwargs)
