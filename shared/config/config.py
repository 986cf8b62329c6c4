"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


def _get_env_bool(key: str, default: str) -> bool:
    """Get boolean environment variable ("true"/"false", case-insensitive)."""
    value = os.getenv(key, default).strip().lower()
    if value not in ("true", "false", "1", "0", "yes", "no"):
        raise ValueError(f"Invalid boolean value for {key}")
    return value in ("true", "1", "yes")


class Config:
    """Centralized configuration from environment variables.

    These are process defaults only. Every component takes a settings record
    built from these values and can override any of them per instance.
    """

    APP_NAME: str = os.getenv("APP_NAME", "password-breach-check")

    # Remote range lookup
    PWNED_CHECK_ENABLED: bool = _get_env_bool("PWNED_CHECK_ENABLED", "true")
    PWNED_RANGE_ENDPOINT: str = os.getenv(
        "PWNED_RANGE_ENDPOINT", "https://api.pwnedpasswords.com/range"
    )
    PWNED_USER_AGENT: str = os.getenv("PWNED_USER_AGENT", f"{APP_NAME}/0.1")

    # Cache
    RANGE_CACHE_TTL_MS: int = _get_env_int("RANGE_CACHE_TTL_MS", str(5 * 60 * 1000))

    # Timeouts
    RANGE_REQUEST_TIMEOUT_MS: int = _get_env_int("RANGE_REQUEST_TIMEOUT_MS", "5000")

    # Retries (total attempts = RANGE_MAX_RETRIES + 1)
    RANGE_MAX_RETRIES: int = _get_env_int("RANGE_MAX_RETRIES", "2")
    RANGE_INITIAL_BACKOFF_MS: int = _get_env_int("RANGE_INITIAL_BACKOFF_MS", "500")
    RANGE_MAX_BACKOFF_MS: int = _get_env_int("RANGE_MAX_BACKOFF_MS", "4000")
    RANGE_BACKOFF_FACTOR: float = _get_env_float("RANGE_BACKOFF_FACTOR", "2.0")

    # Rate limiting: minimum gap between the start of two outbound requests
    RANGE_RATE_LIMIT_INTERVAL_MS: int = _get_env_int("RANGE_RATE_LIMIT_INTERVAL_MS", "1500")

    # Local common passwords list
    COMMON_PASSWORDS_ENABLED: bool = _get_env_bool("COMMON_PASSWORDS_ENABLED", "true")
    COMMON_PASSWORDS_FILE_PATH: str = os.getenv(
        "COMMON_PASSWORDS_FILE_PATH", "/config/common-passwords.json"
    )
    COMMON_PASSWORDS_BASE_URL: str = os.getenv("COMMON_PASSWORDS_BASE_URL", "http://localhost:5173")
    COMMON_PASSWORDS_CACHE_TTL_MS: int = _get_env_int(
        "COMMON_PASSWORDS_CACHE_TTL_MS", str(24 * 60 * 60 * 1000)
    )
    COMMON_PASSWORDS_REQUEST_TIMEOUT_MS: int = _get_env_int(
        "COMMON_PASSWORDS_REQUEST_TIMEOUT_MS", "5000"
    )
    COMMON_PASSWORDS_MAX_CACHE_ENTRIES: int = _get_env_int(
        "COMMON_PASSWORDS_MAX_CACHE_ENTRIES", "10000"
    )
    # Fallback list is cached briefly so a real load is retried soon
    COMMON_PASSWORDS_FALLBACK_TTL_MS: int = _get_env_int(
        "COMMON_PASSWORDS_FALLBACK_TTL_MS", str(5 * 60 * 1000)
    )


config = Config()
