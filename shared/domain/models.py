"""Domain models for range lookups, breach outcomes and password policy."""

from dataclasses import dataclass
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from shared.domain.consts import BreachSource, RiskLevel, ValidationErrorType, RangeProtocol


def split_hash(hash_value: str) -> tuple[str, str]:
    """
    Split a digest into its k-anonymity prefix and suffix.

    Returns:
        Tuple of (prefix, suffix), both uppercase.
    """
    normalized = hash_value.upper()
    return normalized[:RangeProtocol.PREFIX_LENGTH], normalized[RangeProtocol.PREFIX_LENGTH:]


@dataclass
class RangeCacheEntry:
    """Suffix -> occurrences map for one prefix, valid while now < expires_at."""
    prefix: str
    suffixes: dict[str, int]
    expires_at: float

    def is_live(self, now: float) -> bool:
        """Check if the entry has not expired yet."""
        return now < self.expires_at


@dataclass
class BreachOutcome:
    """Result of checking one password for compromise."""
    compromised: bool
    source: BreachSource
    occurrences: Optional[int] = None
    warning: Optional[str] = None

    @property
    def is_degraded(self) -> bool:
        """True when the verdict came from the local list because the remote check failed."""
        return self.source == BreachSource.LOCAL and self.warning is not None

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        if not self.compromised:
            return RiskLevel.SAFE
        if self.occurrences is None:
            # Local list hits carry no count but are well-known weak passwords
            return RiskLevel.HIGH
        if self.occurrences < 10:
            return RiskLevel.LOW
        elif self.occurrences < 100:
            return RiskLevel.MEDIUM
        elif self.occurrences < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "compromised": self.compromised,
            "source": self.source.value,
            "occurrences": self.occurrences,
            "warning": self.warning,
            "risk_level": self.risk_level.value,
        }


@dataclass
class CachedPasswordList:
    """Normalized common passwords plus where and when they were loaded."""
    passwords: tuple[str, ...]
    loaded_at: float
    expires_at: float
    source: str
    version: Optional[str] = None


@dataclass(frozen=True)
class CommonPasswordsCacheStatus:
    """Debug view of the local list cache."""
    has_cache: bool
    is_expired: bool
    source: Optional[str] = None
    version: Optional[str] = None


@dataclass
class PasswordRequirements:
    """Password strength requirements."""
    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    min_special_chars: int = 1


DEFAULT_PASSWORD_REQUIREMENTS = PasswordRequirements()


@dataclass(frozen=True)
class PasswordValidationError:
    """
    Tagged policy violation.

    Only the fields relevant to `type` are set:
    - TOO_SHORT: min_length, actual_length
    - TOO_LONG: max_length, actual_length
    - MISSING_SPECIAL_CHARS: required
    - COMMON_PASSWORD: source, occurrences (REMOTE hits only)
    """
    type: ValidationErrorType
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    actual_length: Optional[int] = None
    required: Optional[int] = None
    source: Optional[BreachSource] = None
    occurrences: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, dropping unset fields."""
        data: dict[str, Any] = {"type": self.type.value}
        for key in ("min_length", "max_length", "actual_length", "required", "occurrences"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.source is not None:
            data["source"] = self.source.value
        return data


class PasswordListPayload(BaseModel):
    """JSON payload of the external common passwords list."""
    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "version": "1.0.0",
                "description": "Most common passwords",
                "lastUpdated": "2025-01-01",
                "source": "curated",
                "passwords": ["123456", "password", "qwerty"],
            }
        },
    )

    version: Optional[str] = Field(None, description="List version")
    description: Optional[str] = Field(None, description="Human-readable description")
    last_updated: Optional[str] = Field(None, alias="lastUpdated", description="Last update date")
    source: Optional[str] = Field(None, description="Where the list came from")
    # Non-string entries are tolerated here and dropped during normalization
    passwords: list[Any] = Field(..., description="Password entries")
