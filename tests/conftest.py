"""Pytest configuration and fixtures."""

import hashlib
import httpx
import pytest
import respx
from shared.config.settings import CommonPasswordsSettings, RangeQuerySettings, build_settings
from shared.factories.hasher_factory import create_hasher
from verifier.infrastructure.clock import VirtualClock

RANGE_ENDPOINT = "https://range.test/range"
COMMON_LIST_URL = "https://static.test/config/common-passwords.json"


@pytest.fixture(autouse=True)
def _isolate_global_respx_router():
    """Roll back routes added to respx's global router so they don't leak between tests."""
    respx.mock.snapshot()
    yield
    respx.mock.rollback()


@pytest.fixture
def clock():
    """Virtual clock so backoff and rate limit waits take no real time."""
    return VirtualClock(start=1000.0)


@pytest.fixture
def range_settings():
    """Range settings with small backoffs and no rate limit."""
    return build_settings(
        RangeQuerySettings,
        enabled=True,
        endpoint=RANGE_ENDPOINT,
        cache_ttl_ms=60_000,
        request_timeout_ms=1000,
        max_retries=2,
        initial_backoff_ms=100,
        max_backoff_ms=400,
        backoff_factor=2.0,
        rate_limit_interval_ms=0,
        user_agent="breach-check-tests/1.0",
    )


@pytest.fixture
def common_settings():
    """Common passwords settings pointing at an absolute test URL."""
    return build_settings(
        CommonPasswordsSettings,
        enabled=True,
        file_path=COMMON_LIST_URL,
        cache_ttl_ms=60_000,
        fallback_ttl_ms=5 * 60 * 1000,
        request_timeout_ms=1000,
        max_cache_entries=10_000,
    )


@pytest.fixture
def hasher():
    """SHA-1 hasher resolved once, as at startup."""
    return create_hasher()


@pytest.fixture
def http_client():
    """Plain AsyncClient; respx intercepts its transport inside respx.mock."""
    return httpx.AsyncClient()


@pytest.fixture
def split_password():
    """Return (prefix, suffix) of a password's SHA-1, computed independently of the hasher."""
    def _split(password: str) -> tuple[str, str]:
        digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
        return digest[:5], digest[5:]
    return _split


@pytest.fixture
def range_body():
    """Build a range response body from suffix -> count."""
    def _body(entries: dict[str, int]) -> str:
        return "\r\n".join(f"{suffix}:{count}" for suffix, count in entries.items())
    return _body
