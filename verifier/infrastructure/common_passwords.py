"""Loader for the local common passwords list."""

import asyncio
import logging
from typing import Any, Iterable, Optional
import httpx
from pydantic import ValidationError
from shared.config.common_passwords import COMMON_PASSWORDS_FALLBACK
from shared.config.settings import CommonPasswordsSettings, build_settings
from shared.domain.consts import FallbackSource
from shared.domain.errors import SchemaError
from shared.domain.models import CachedPasswordList, CommonPasswordsCacheStatus, PasswordListPayload
from verifier.infrastructure.clock import Clock

logger = logging.getLogger(__name__)


def normalize_passwords(entries: Iterable[Any]) -> list[str]:
    """Trim, lowercase and de-duplicate, keeping first-seen order. Non-strings and blanks are dropped."""
    normalized = (
        entry.strip().lower()
        for entry in entries
        if isinstance(entry, str) and entry.strip()
    )
    return list(dict.fromkeys(normalized))


class LocalCommonPasswordSource:
    """
    Known-weak passwords that do not depend on the range service.

    The list is fetched once from a JSON resource and cached for
    cache_ttl_ms. Concurrent get() calls during a load share that load.
    Any load failure falls back to the built-in list, cached for only
    fallback_ttl_ms so the real list is retried soon.
    """

    def __init__(
        self,
        settings: Optional[CommonPasswordsSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings or build_settings(CommonPasswordsSettings)
        self.clock = clock or Clock()
        self._cached: Optional[CachedPasswordList] = None
        self._lookup: frozenset[str] = frozenset()
        self._loading: Optional[asyncio.Future] = None
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient()

    async def get(self) -> tuple[str, ...]:
        """Return the cached list, loading it if missing or expired."""
        if self._cached is not None and self._cached.expires_at > self.clock.now():
            return self._cached.passwords

        if self._loading is None:
            self._loading = asyncio.ensure_future(self._load())
            self._loading.add_done_callback(self._settle)
        else:
            logger.debug("Common passwords: joining in-flight load")

        return await asyncio.shield(self._loading)

    async def reload(self) -> tuple[str, ...]:
        """Force a fresh load, bypassing the cache."""
        self._cached = None
        self._loading = None
        return await self.get()

    async def contains(self, password: str) -> bool:
        """Check if the lowercased password is in the list."""
        await self.get()
        return password.lower() in self._lookup

    def peek(self) -> Optional[tuple[str, ...]]:
        """Return the last loaded list without I/O, even if expired. None if never loaded."""
        if self._cached is None:
            return None
        return self._cached.passwords

    def cache_status(self) -> Optional[CommonPasswordsCacheStatus]:
        """Get cache status for debugging."""
        if self._cached is None:
            return None
        return CommonPasswordsCacheStatus(
            has_cache=True,
            is_expired=self._cached.expires_at <= self.clock.now(),
            source=self._cached.source,
            version=self._cached.version,
        )

    def _settle(self, done: asyncio.Future) -> None:
        if not done.cancelled():
            done.exception()
        if self._loading is done:
            self._loading = None

    def _store(
        self,
        passwords: list[str],
        source: str,
        ttl_ms: int,
        version: Optional[str] = None,
    ) -> tuple[str, ...]:
        now = self.clock.now()
        self._cached = CachedPasswordList(
            passwords=tuple(passwords),
            loaded_at=now,
            expires_at=now + ttl_ms / 1000,
            source=source,
            version=version,
        )
        self._lookup = frozenset(self._cached.passwords)
        return self._cached.passwords

    def _fallback(self) -> list[str]:
        return list(COMMON_PASSWORDS_FALLBACK[:self.settings.max_cache_entries])

    async def _load(self) -> tuple[str, ...]:
        if not self.settings.enabled:
            logger.debug("Common passwords: loading disabled, using built-in list")
            return self._store(self._fallback(), FallbackSource.NAME, self.settings.cache_ttl_ms)

        if not self.settings.file_path:
            logger.debug("Common passwords: no file path configured, using built-in list")
            return self._store(self._fallback(), FallbackSource.NAME, self.settings.cache_ttl_ms)

        try:
            data = await self._fetch_password_list()
            passwords, version = self._validate_and_normalize(data)
        except (httpx.HTTPError, SchemaError, ValueError) as e:
            logger.warning(
                f"Common passwords: failed to load from {self.settings.file_path}, "
                f"using built-in list: {e}"
            )
            return self._store(self._fallback(), FallbackSource.NAME, self.settings.fallback_ttl_ms)
        except Exception as e:
            logger.error(
                f"Common passwords: unexpected error loading {self.settings.file_path}, "
                f"using built-in list: {e}",
                exc_info=True,
            )
            return self._store(self._fallback(), FallbackSource.NAME, self.settings.fallback_ttl_ms)

        logger.info(f"Common passwords: loaded {len(passwords)} passwords from {self.settings.file_path}")
        return self._store(passwords, self.settings.file_path, self.settings.cache_ttl_ms, version)

    def _resolve_url(self) -> str:
        """Absolute URLs are used as-is; relative paths resolve against base_url."""
        file_path = self.settings.file_path
        if file_path.startswith(("http://", "https://")):
            return file_path
        return str(httpx.URL(self.settings.base_url).join(file_path))

    async def _fetch_password_list(self) -> Any:
        timeout = self.settings.request_timeout_ms / 1000 if self.settings.request_timeout_ms > 0 else None
        response = await self.client.get(
            self._resolve_url(),
            headers={"Accept": "application/json", "Cache-Control": "no-cache"},
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    def _validate_and_normalize(self, data: Any) -> tuple[list[str], Optional[str]]:
        """
        Validate payload shape and normalize its passwords.

        Returns:
            Tuple of (passwords capped at max_cache_entries, payload version)

        Raises:
            SchemaError: If the payload is not an object with a passwords
                list, or the list holds no usable entries.
        """
        if not isinstance(data, dict):
            raise SchemaError("Invalid response format: expected object")
        try:
            payload = PasswordListPayload.model_validate(data)
        except ValidationError as e:
            raise SchemaError(f"Invalid response format: {e.error_count()} validation errors") from e

        passwords = normalize_passwords(payload.passwords)
        if not passwords:
            raise SchemaError("No valid passwords found in response")

        max_entries = self.settings.max_cache_entries
        if len(passwords) > max_entries:
            logger.warning(
                f"Common passwords: list ({len(passwords)}) exceeds max_cache_entries "
                f"({max_entries}), truncating"
            )
            passwords = passwords[:max_entries]

        return passwords, payload.version

    async def close(self) -> None:
        """Close HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()
