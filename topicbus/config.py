"""Broker settings read from the environment (and an optional .env file)."""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_WORKERS = 4
DEFAULT_THREAD_PREFIX = "topicbus-dispatch"

# env var -> settings field
_ENV_FIELDS = {
    "PUBSUB_MAX_WORKERS": "max_workers",
    "PUBSUB_THREAD_PREFIX": "thread_name_prefix",
    "PUBSUB_LOG_LEVEL": "log_level",
    "API_KEY": "api_key",
}


class PubSubSettings(BaseModel):
    """Validated broker settings."""

    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    thread_name_prefix: str = DEFAULT_THREAD_PREFIX
    log_level: str = "INFO"
    api_key: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("api_key")
    @classmethod
    def _blank_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @classmethod
    def from_env(cls) -> "PubSubSettings":
        """Build settings from PUBSUB_* / API_KEY env vars; unset vars keep defaults."""
        raw: Dict[str, Any] = {}
        for env_name, field_name in _ENV_FIELDS.items():
            value = os.environ.get(env_name)
            if value is not None:
                raw[field_name] = value
        return cls.model_validate(raw)


def load_settings(env_file: Optional[str] = None) -> PubSubSettings:
    """Load .env (never overriding the real environment), then read settings."""
    load_dotenv(env_file, override=False)
    return PubSubSettings.from_env()
