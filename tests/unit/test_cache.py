"""Tests for RangeCache functionality."""

import pytest
from verifier.infrastructure.cache import RangeCache


class TestRangeCache:
    """Tests for per-prefix range cache."""

    @pytest.fixture
    def cache(self):
        return RangeCache(ttl_seconds=60.0)

    def test_cache_empty_initially(self, cache):
        """Test that cache starts empty."""
        assert cache.get("ABCDE", now=0.0) is None
        assert len(cache) == 0

    def test_cache_put_and_get(self, cache):
        """Test basic cache put and get operations."""
        suffixes = {"0" * 35: 3}
        cache.put("ABCDE", suffixes, now=0.0)
        assert cache.get("ABCDE", now=1.0) == suffixes

    def test_cache_case_insensitive_prefix(self, cache):
        """Test that prefixes are normalized to uppercase."""
        cache.put("abcde", {"F" * 35: 1}, now=0.0)
        assert cache.get("ABCDE", now=0.0) == {"F" * 35: 1}
        assert "abcde" in cache

    def test_entry_live_until_expiry(self, cache):
        """Test that entry is valid strictly before expires_at."""
        entry = cache.put("ABCDE", {}, now=100.0)
        assert entry.expires_at == 160.0
        assert cache.get("ABCDE", now=159.999) == {}
        assert cache.get("ABCDE", now=160.0) is None

    def test_expired_entry_is_dropped(self, cache):
        """Test that reading an expired entry removes it."""
        cache.put("ABCDE", {}, now=0.0)
        cache.get("ABCDE", now=61.0)
        assert "ABCDE" not in cache
        assert len(cache) == 0

    def test_put_replaces_existing_entry(self, cache):
        """Test that there is at most one entry per prefix."""
        cache.put("ABCDE", {"A" * 35: 1}, now=0.0)
        cache.put("ABCDE", {"B" * 35: 2}, now=30.0)
        assert len(cache) == 1
        assert cache.get("ABCDE", now=80.0) == {"B" * 35: 2}

    def test_multiple_prefixes_independent(self, cache):
        """Test that different prefixes are stored independently."""
        cache.put("AAAAA", {"1" * 35: 1}, now=0.0)
        cache.put("BBBBB", {"2" * 35: 2}, now=0.0)
        assert cache.get("AAAAA", now=0.0) == {"1" * 35: 1}
        assert cache.get("BBBBB", now=0.0) == {"2" * 35: 2}

    def test_zero_ttl_never_serves(self):
        """Test that a zero TTL cache never returns entries."""
        cache = RangeCache(ttl_seconds=0.0)
        cache.put("ABCDE", {}, now=5.0)
        assert cache.get("ABCDE", now=5.0) is None

    def test_cache_clear(self, cache):
        """Test that clear() removes all cached entries."""
        cache.put("AAAAA", {}, now=0.0)
        cache.put("BBBBB", {}, now=0.0)
        cache.clear()
        assert cache.get("AAAAA", now=0.0) is None
        assert len(cache) == 0

    def test_cache_clear_allows_reuse(self, cache):
        """Test that cache can be used normally after clearing."""
        cache.put("AAAAA", {}, now=0.0)
        cache.clear()
        cache.put("BBBBB", {"C" * 35: 9}, now=0.0)
        assert cache.get("BBBBB", now=0.0) == {"C" * 35: 9}
        assert cache.get("AAAAA", now=0.0) is None
