from __future__ import annotations

from dataclasses import dataclass

from pwpolicy.exceptions import ConfigurationError


@dataclass(frozen=True)
class PolicyConfiguration:
    """Thresholds describing an acceptable password.

    Built once at startup and shared read-only by every validation call.
    """

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

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ConfigurationError(f"min_length must be >= 0, got {self.min_length}")
        if self.min_length > self.max_length:
            raise ConfigurationError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        if self.max_consecutive_identical_chars < 1:
            raise ConfigurationError(
                "max_consecutive_identical_chars must be >= 1, "
                f"got {self.max_consecutive_identical_chars}"
            )
        if self.required_unique_chars < 1:
            raise ConfigurationError(
                f"required_unique_chars must be >= 1, got {self.required_unique_chars}"
            )


__all__ = ["PolicyConfiguration"]
