"""Exception hierarchy for breach verification."""

from typing import Optional


class BreachCheckError(Exception):
    """Base class for all breach verification errors."""


class CryptoUnavailable(BreachCheckError):
    """No usable digest primitive on this platform."""


class ConfigError(BreachCheckError, ValueError):
    """Invalid configuration. Raised when settings are built."""


class SchemaError(BreachCheckError):
    """Common passwords payload does not have the expected shape."""


class RangeQueryError(BreachCheckError):
    """A range lookup attempt failed."""


class NetworkError(RangeQueryError):
    """Transport-level failure (connection refused, DNS, reset...)."""


class RequestTimeoutError(RangeQueryError):
    """A single attempt exceeded its timeout."""


class HttpStatusError(RangeQueryError):
    """Remote service answered with a non-200 status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Range service responded with status {status_code}")
