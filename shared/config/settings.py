"""Validated, per-instance settings built on top of the environment config."""

from typing import Any, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from shared.config.config import config
from shared.domain.errors import ConfigError

SettingsT = TypeVar("SettingsT", bound=BaseModel)


class RangeQuerySettings(BaseModel):
    """Settings for the remote k-anonymity range lookup."""
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    enabled: bool = Field(default_factory=lambda: config.PWNED_CHECK_ENABLED)
    endpoint: str = Field(default_factory=lambda: config.PWNED_RANGE_ENDPOINT, min_length=1)
    cache_ttl_ms: int = Field(default_factory=lambda: config.RANGE_CACHE_TTL_MS, ge=0)
    request_timeout_ms: int = Field(default_factory=lambda: config.RANGE_REQUEST_TIMEOUT_MS, ge=0)
    max_retries: int = Field(default_factory=lambda: config.RANGE_MAX_RETRIES, ge=0)
    initial_backoff_ms: int = Field(default_factory=lambda: config.RANGE_INITIAL_BACKOFF_MS, ge=0)
    max_backoff_ms: int = Field(default_factory=lambda: config.RANGE_MAX_BACKOFF_MS, ge=0)
    backoff_factor: float = Field(default_factory=lambda: config.RANGE_BACKOFF_FACTOR, ge=1.0)
    rate_limit_interval_ms: int = Field(
        default_factory=lambda: config.RANGE_RATE_LIMIT_INTERVAL_MS, ge=0
    )
    user_agent: Optional[str] = Field(default_factory=lambda: config.PWNED_USER_AGENT)

    @field_validator("endpoint")
    @classmethod
    def strip_endpoint(cls, value: str) -> str:
        """Normalize endpoint so "{endpoint}/{prefix}" never doubles the slash."""
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("endpoint must not be empty")
        return value


class CommonPasswordsSettings(BaseModel):
    """Settings for the local common passwords list."""
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    enabled: bool = Field(default_factory=lambda: config.COMMON_PASSWORDS_ENABLED)
    file_path: Optional[str] = Field(default_factory=lambda: config.COMMON_PASSWORDS_FILE_PATH)
    base_url: str = Field(default_factory=lambda: config.COMMON_PASSWORDS_BASE_URL)
    cache_ttl_ms: int = Field(default_factory=lambda: config.COMMON_PASSWORDS_CACHE_TTL_MS, ge=0)
    request_timeout_ms: int = Field(
        default_factory=lambda: config.COMMON_PASSWORDS_REQUEST_TIMEOUT_MS, ge=0
    )
    max_cache_entries: int = Field(
        default_factory=lambda: config.COMMON_PASSWORDS_MAX_CACHE_ENTRIES, ge=1
    )
    fallback_ttl_ms: int = Field(default_factory=lambda: config.COMMON_PASSWORDS_FALLBACK_TTL_MS, ge=0)


def build_settings(settings_cls: type[SettingsT], **overrides: Any) -> SettingsT:
    """
    Build a settings record from environment defaults plus overrides.

    Raises:
        ConfigError: If any value is invalid (negative TTL, non-positive
            cache size, unknown key...).
    """
    try:
        return settings_cls(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid {settings_cls.__name__}: {e}") from e
