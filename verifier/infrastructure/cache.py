"""Cache for range lookup results."""

import logging
from typing import Optional
from shared.domain.models import RangeCacheEntry

logger = logging.getLogger(__name__)


class RangeCache:
    """
    In-memory cache mapping hash prefix -> suffix occurrences.

    Entries expire after a fixed TTL. At most one entry per prefix: put()
    replaces whatever was there. Expired entries are dropped lazily on get().
    Lives as long as the owning client; there is no background eviction.
    """

    def __init__(self, ttl_seconds: float) -> None:
        self.ttl_seconds = ttl_seconds
        self._cache: dict[str, RangeCacheEntry] = {}

    def get(self, prefix: str, now: float) -> Optional[dict[str, int]]:
        """Get suffix map for prefix if cached and not expired."""
        key = prefix.upper()
        entry = self._cache.get(key)
        if entry is None:
            return None
        if not entry.is_live(now):
            logger.debug(f"Range cache: entry for {key} expired")
            del self._cache[key]
            return None
        return entry.suffixes

    def put(self, prefix: str, suffixes: dict[str, int], now: float) -> RangeCacheEntry:
        """Store suffix map for prefix, valid until now + ttl."""
        key = prefix.upper()
        entry = RangeCacheEntry(prefix=key, suffixes=suffixes, expires_at=now + self.ttl_seconds)
        self._cache[key] = entry
        return entry

    def clear(self) -> None:
        """Remove all cached entries."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, prefix: str) -> bool:
        return prefix.upper() in self._cache
