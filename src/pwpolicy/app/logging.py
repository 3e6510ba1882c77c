from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception

from pydantic_settings import BaseSettings, SettingsConfigDict

# Map common aliases -> canonical
_ENV_SYNONYMS: dict[str, str] = {
    "development": "dev",
    "dev": "dev",
    "local": "local",
    "test": "test",
    "preview": "test",
    "prod": "prod",
    "production": "prod",
}

# Structured fields the validator and the fastapi-users adapter attach via `extra=`
_DECISION_FIELDS = ("user_id", "violation_codes")


def current_env() -> str:
    """Resolve the environment from APP_ENV; unknown or missing values mean ``local``."""
    raw = (os.getenv("APP_ENV") or "").strip().lower()
    return _ENV_SYNONYMS.get(raw, "local")


class LoggingSettings(BaseSettings):
    level: str | None = None
    format: str | None = None
    stack_limit: int = 4000

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    def resolved_level(self) -> str:
        if self.level:
            return self.level.upper()
        return "INFO" if current_env() == "prod" else "DEBUG"

    def resolved_format(self) -> str:
        fmt = (self.format or "").lower()
        if fmt:
            return "json" if fmt == "json" else "plain"
        return "json" if current_env() == "prod" else "plain"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; password decisions carry their violation codes."""

    def __init__(self, *args, stack_limit: int = 4000, **kwargs):
        super().__init__(*args, **kwargs)
        self.stack_limit = stack_limit

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _DECISION_FIELDS:
            value = getattr(record, field, None)
            if value is None:
                continue
            payload[field] = list(value) if field == "violation_codes" else str(value)

        if record.exc_info and record.exc_info[0] is not None:
            stack = "".join(format_exception(*record.exc_info))
            if len(stack) > self.stack_limit:
                stack = stack[: self.stack_limit] + "...(truncated)"
            payload["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stack": stack,
            }

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure the root logger for a host that has no logging setup of its own."""
    if settings is None:
        settings = LoggingSettings()
    level = settings.resolved_level()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,  # keep the host's loggers
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "stack_limit": settings.stack_limit,
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": settings.resolved_format(),
                }
            },
            "root": {"level": level, "handlers": ["stream"]},
            # Breach lookups go through httpx; its per-request lines are noise here
            "loggers": {
                "httpx": {"level": "WARNING", "propagate": True},
                "httpcore": {"level": "WARNING", "propagate": True},
            },
        }
    )


__all__ = ["JsonFormatter", "LoggingSettings", "current_env", "setup_logging"]
