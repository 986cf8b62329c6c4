"""HTTP client for k-anonymity password range lookups."""

import asyncio
import logging
import re
from typing import Optional
import httpx
from shared.config.settings import RangeQuerySettings, build_settings
from shared.domain.consts import RangeProtocol
from shared.domain.errors import (
    HttpStatusError,
    NetworkError,
    RangeQueryError,
    RequestTimeoutError,
)
from shared.domain.models import split_hash
from shared.factories.hasher_factory import create_hasher
from shared.interfaces.password_hasher import PasswordHasher
from verifier.infrastructure.cache import RangeCache
from verifier.infrastructure.clock import Clock

logger = logging.getLogger(__name__)

_PREFIX_PATTERN = re.compile(f"^[0-9A-F]{{{RangeProtocol.PREFIX_LENGTH}}}$")


class RangeQueryClient:
    """
    Client for the Pwned Passwords style range API.

    Only the first 5 hex characters of the password's SHA-1 digest are sent;
    the service answers with every known suffix under that prefix and the
    match is completed locally.

    Per instance it keeps:
    - a per-prefix TTL cache consulted before any network I/O
    - an in-flight map so concurrent queries for one prefix share one request
    - a single last-request-start timestamp used to rate limit all prefixes

    Failed attempts (transport error, timeout, non-200) are retried with
    exponential backoff; max_retries=N means N + 1 attempts in total.
    """

    def __init__(
        self,
        settings: Optional[RangeQuerySettings] = None,
        hasher: Optional[PasswordHasher] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize range client.

        Raises:
            CryptoUnavailable: If no hasher is given and SHA-1 cannot be resolved.
        """
        self.settings = settings or build_settings(RangeQuerySettings)
        self.hasher = hasher or create_hasher()
        self.clock = clock or Clock()
        self.cache = RangeCache(self.settings.cache_ttl_ms / 1000)
        self._in_flight: dict[str, asyncio.Future] = {}
        self._last_request_started: Optional[float] = None
        # Created on first use so it binds to the loop that runs the requests
        self._rate_limit_lock: Optional[asyncio.Lock] = None
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10)
        )
        # Outbound attempts issued, including retries
        self.request_count = 0

    async def lookup(self, password: str) -> Optional[int]:
        """
        Check one password against the range service.

        Returns:
            Number of breach occurrences (possibly 0), or None if the suffix
            is not listed.
        """
        prefix, suffix = split_hash(self.hasher.hash(password))
        suffixes = await self.query(prefix)
        return suffixes.get(suffix)

    async def query(self, prefix: str) -> dict[str, int]:
        """
        Return suffix -> occurrences for all hashes under prefix.

        Served from cache while the entry is live. Concurrent callers for the
        same prefix await one shared request and see the same result or error.

        Raises:
            ValueError: If prefix is not 5 hex characters.
            RangeQueryError: NetworkError, RequestTimeoutError or
                HttpStatusError from the last attempt once retries run out.
        """
        prefix = self._normalize_prefix(prefix)

        cached = self.cache.get(prefix, self.clock.now())
        if cached is not None:
            logger.debug(f"Range {prefix}: cache hit ({len(cached)} suffixes)")
            return cached

        pending = self._in_flight.get(prefix)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch_and_cache(prefix))
            self._in_flight[prefix] = pending
            pending.add_done_callback(lambda done, key=prefix: self._settle(key, done))
        else:
            logger.debug(f"Range {prefix}: joining in-flight request")

        # Shield so one caller being cancelled does not cancel the shared request
        return await asyncio.shield(pending)

    def clear_cache(self) -> None:
        """Drop all cached prefixes. In-flight requests are unaffected."""
        self.cache.clear()

    def in_flight_count(self) -> int:
        """Number of prefixes with a request currently pending."""
        return len(self._in_flight)

    def _settle(self, prefix: str, done: asyncio.Future) -> None:
        """Remove a settled request from the in-flight map."""
        if not done.cancelled():
            # Mark the error retrieved even if every waiter was cancelled
            done.exception()
        if self._in_flight.get(prefix) is done:
            del self._in_flight[prefix]

    def _normalize_prefix(self, prefix: str) -> str:
        normalized = prefix.strip().upper()
        if not _PREFIX_PATTERN.match(normalized):
            raise ValueError(
                f"Invalid range prefix: must be {RangeProtocol.PREFIX_LENGTH} hex characters"
            )
        return normalized

    async def _fetch_and_cache(self, prefix: str) -> dict[str, int]:
        suffixes = await self._request_with_retry(prefix)
        self.cache.put(prefix, suffixes, self.clock.now())
        logger.debug(f"Range {prefix}: cached {len(suffixes)} suffixes")
        return suffixes

    async def _request_with_retry(self, prefix: str) -> dict[str, int]:
        attempt = 0
        backoff_ms = float(self.settings.initial_backoff_ms)
        last_error: Optional[RangeQueryError] = None

        # Runs while attempt <= max_retries: max_retries=3 gives attempts 0..3
        while attempt <= self.settings.max_retries:
            try:
                await self._apply_rate_limit()
                return await self._perform_request(prefix)
            except RangeQueryError as e:
                last_error = e
                attempt += 1
                if attempt > self.settings.max_retries:
                    break
                delay_ms = min(backoff_ms, self.settings.max_backoff_ms)
                logger.warning(
                    f"Range {prefix}: attempt {attempt} failed ({e}), "
                    f"retrying in {delay_ms:.0f}ms"
                )
                await self.clock.sleep(delay_ms / 1000)
                backoff_ms = min(backoff_ms * self.settings.backoff_factor, self.settings.max_backoff_ms)

        logger.error(f"Range {prefix}: giving up after {attempt} attempts: {last_error}")
        raise last_error

    async def _apply_rate_limit(self) -> None:
        """Wait until rate_limit_interval_ms has passed since the last request started."""
        interval = self.settings.rate_limit_interval_ms / 1000
        if self._rate_limit_lock is None:
            self._rate_limit_lock = asyncio.Lock()
        async with self._rate_limit_lock:
            if self._last_request_started is not None and interval > 0:
                elapsed = self.clock.now() - self._last_request_started
                if elapsed < interval:
                    wait = interval - elapsed
                    logger.debug(f"Rate limit: waiting {wait * 1000:.0f}ms")
                    await self.clock.sleep(wait)
            self._last_request_started = self.clock.now()

    def _build_headers(self) -> dict[str, str]:
        headers = {RangeProtocol.PADDING_HEADER: "true"}
        if self.settings.user_agent:
            headers[RangeProtocol.USER_AGENT_HEADER] = self.settings.user_agent
        return headers

    async def _perform_request(self, prefix: str) -> dict[str, int]:
        """
        Issue one GET {endpoint}/{prefix}.

        Returns:
            Parsed suffix map.

        Raises:
            RequestTimeoutError, NetworkError, HttpStatusError
        """
        url = f"{self.settings.endpoint}/{prefix}"
        timeout = self.settings.request_timeout_ms / 1000 if self.settings.request_timeout_ms > 0 else None
        self.request_count += 1

        try:
            logger.debug(f"Range {prefix}: sending request to {self.settings.endpoint}")
            response = await asyncio.wait_for(
                self.client.get(url, headers=self._build_headers(), timeout=timeout),
                timeout=timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise RequestTimeoutError(
                f"Range request timed out after {self.settings.request_timeout_ms}ms"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Range request failed: {e}") from e

        if response.status_code != 200:
            raise HttpStatusError(response.status_code)

        return self.parse_range_response(response.text)

    @staticmethod
    def parse_range_response(body: str) -> dict[str, int]:
        """
        Parse newline-delimited SUFFIX:COUNT lines.

        Suffixes are upper-cased. Lines without exactly one separator, with an
        empty side, or with a non-integer count are skipped.
        """
        suffixes: dict[str, int] = {}
        for line in body.splitlines():
            parts = line.strip().split(":")
            if len(parts) != 2:
                continue
            suffix, count = parts[0].strip().upper(), parts[1].strip()
            if not suffix or not count:
                continue
            try:
                suffixes[suffix] = int(count)
            except ValueError:
                continue
        return suffixes

    async def close(self) -> None:
        """
        Close HTTP client and cleanup resources.

        Only closes the client if this instance created it.
        """
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "RangeQueryClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
