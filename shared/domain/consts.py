"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class BreachSource(str, Enum):
    """Which check produced a breach verdict."""
    REMOTE = "REMOTE"
    LOCAL = "LOCAL"


class RiskLevel(str, Enum):
    """Risk level based on how often a password was seen in breaches."""
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ValidationErrorType(str, Enum):
    """Password policy violation tags."""
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    MISSING_UPPERCASE = "MISSING_UPPERCASE"
    MISSING_LOWERCASE = "MISSING_LOWERCASE"
    MISSING_NUMBERS = "MISSING_NUMBERS"
    MISSING_SPECIAL_CHARS = "MISSING_SPECIAL_CHARS"
    COMMON_PASSWORD = "COMMON_PASSWORD"
    CONTAINS_USERNAME = "CONTAINS_USERNAME"


class StrengthLabel(str, Enum):
    """Human-readable password strength buckets."""
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very strong"


class HashAlgorithm:
    """Hash algorithm constants."""
    SHA1 = "sha1"

    # Hash length constants
    SHA1_LENGTH = 40  # SHA-1 hash is 40 hex characters


class RangeProtocol:
    """k-anonymity range protocol constants."""
    PREFIX_LENGTH = 5
    SUFFIX_LENGTH = HashAlgorithm.SHA1_LENGTH - PREFIX_LENGTH
    PADDING_HEADER = "Add-Padding"
    USER_AGENT_HEADER = "User-Agent"


class Warnings:
    """Warning messages attached to degraded breach outcomes."""
    REMOTE_DISABLED = "Remote breach checking disabled by configuration."
    UNKNOWN_REMOTE_ERROR = "Unknown error when querying the breach range service"
    HASHER_UNAVAILABLE = "No password hasher available; remote breach check skipped."


class FallbackSource:
    """Source label for the built-in common passwords list."""
    NAME = "fallback"
