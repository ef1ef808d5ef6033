"""Library configuration via environment variables."""

from datetime import timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings


def _load_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


class Settings(BaseSettings):
    """Settings loaded from MODELME_* environment variables."""

    # Logging
    LOG_LEVEL: str = "warning"
    LOG_JSON: bool = False

    # Validation
    MAX_DEPTH: int = 64
    DEFAULT_TIMEZONE: str = "UTC"

    model_config = {"env_prefix": "MODELME_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("MAX_DEPTH")
    @classmethod
    def _positive_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("MAX_DEPTH must be at least 1")
        return value

    @field_validator("DEFAULT_TIMEZONE")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            _load_timezone(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{value}'") from e
        return value

    @property
    def timezone(self) -> tzinfo:
        """Zone applied to datetime text that carries no offset."""
        return _load_timezone(self.DEFAULT_TIMEZONE)


@lru_cache
def get_settings() -> Settings:
    return Settings()
