"""Domain models, constants and errors."""

from shared.domain.models import (
    BreachOutcome,
    CachedPasswordList,
    CommonPasswordsCacheStatus,
    PasswordListPayload,
    PasswordRequirements,
    PasswordValidationError,
    RangeCacheEntry,
    DEFAULT_PASSWORD_REQUIREMENTS,
    split_hash,
)
from shared.domain.consts import (
    BreachSource,
    RiskLevel,
    ValidationErrorType,
    StrengthLabel,
    HashAlgorithm,
    RangeProtocol,
    Warnings,
    FallbackSource,
)
from shared.domain.errors import (
    BreachCheckError,
    CryptoUnavailable,
    ConfigError,
    SchemaError,
    RangeQueryError,
    NetworkError,
    RequestTimeoutError,
    HttpStatusError,
)

__all__ = [
    "BreachOutcome",
    "CachedPasswordList",
    "CommonPasswordsCacheStatus",
    "PasswordListPayload",
    "PasswordRequirements",
    "PasswordValidationError",
    "RangeCacheEntry",
    "DEFAULT_PASSWORD_REQUIREMENTS",
    "split_hash",
    "BreachSource",
    "RiskLevel",
    "ValidationErrorType",
    "StrengthLabel",
    "HashAlgorithm",
    "RangeProtocol",
    "Warnings",
    "FallbackSource",
    "BreachCheckError",
    "CryptoUnavailable",
    "ConfigError",
    "SchemaError",
    "RangeQueryError",
    "NetworkError",
    "RequestTimeoutError",
    "HttpStatusError",
]
