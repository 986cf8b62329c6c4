"""Tests for LocalCommonPasswordSource loading and caching."""

import asyncio
import httpx
import pytest
import respx
from shared.config.common_passwords import COMMON_PASSWORDS_FALLBACK
from shared.config.settings import CommonPasswordsSettings, build_settings
from shared.domain.consts import FallbackSource
from verifier.infrastructure.common_passwords import LocalCommonPasswordSource, normalize_passwords

LIST_URL = "https://static.test/config/common-passwords.json"


def list_payload(passwords, version="2.1.0"):
    return {
        "version": version,
        "description": "Test list",
        "lastUpdated": "2025-01-01",
        "passwords": passwords,
    }


@pytest.fixture
def source(common_settings, http_client, clock):
    return LocalCommonPasswordSource(common_settings, http_client=http_client, clock=clock)


def make_source(http_client, clock, **overrides) -> LocalCommonPasswordSource:
    values = {
        "enabled": True,
        "file_path": LIST_URL,
        "cache_ttl_ms": 60_000,
        "fallback_ttl_ms": 300_000,
        "request_timeout_ms": 1000,
        "max_cache_entries": 10_000,
    }
    values.update(overrides)
    return LocalCommonPasswordSource(
        build_settings(CommonPasswordsSettings, **values), http_client=http_client, clock=clock
    )


class TestNormalizePasswords:
    """Tests for list normalization."""

    def test_trims_lowercases_and_dedupes(self):
        entries = [" Password ", "password", "QWERTY", "qwerty", "letmein"]
        assert normalize_passwords(entries) == ["password", "qwerty", "letmein"]

    def test_drops_blank_and_non_string(self):
        assert normalize_passwords(["", "   ", None, 123, {"a": 1}, "ok"]) == ["ok"]


class TestLoading:
    """Tests for fetching the configured list."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_loads_and_normalizes(self, source):
        """Test that the list is fetched, normalized and reported in cache status."""
        respx.get(LIST_URL).mock(
            return_value=httpx.Response(200, json=list_payload([" Dragon ", "dragon", "Shadow", 42]))
        )

        passwords = await source.get()

        assert passwords == ("dragon", "shadow")
        status = source.cache_status()
        assert status.has_cache
        assert not status.is_expired
        assert status.source == LIST_URL
        assert status.version == "2.1.0"

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_headers(self, source):
        """Test that the list is requested as uncached JSON."""
        route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        await source.get()

        request = route.calls.last.request
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Cache-Control"] == "no-cache"

    @pytest.mark.asyncio
    @respx.mock
    async def test_relative_path_resolved_against_base_url(self, http_client, clock):
        """Test that a relative file path is joined onto base_url."""
        source = make_source(
            http_client, clock, file_path="/config/common-passwords.json", base_url="https://app.test"
        )
        route = respx.get("https://app.test/config/common-passwords.json").mock(
            return_value=httpx.Response(200, json=list_payload(["dragon"]))
        )

        assert await source.get() == ("dragon",)
        assert route.call_count == 1
        assert source.cache_status().source == "/config/common-passwords.json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_truncates_to_max_entries(self, http_client, clock, caplog):
        """Test that an oversized list keeps only the first max_cache_entries."""
        source = make_source(http_client, clock, max_cache_entries=3)
        respx.get(LIST_URL).mock(
            return_value=httpx.Response(200, json=list_payload(["a1", "b2", "c3", "d4", "e5"]))
        )

        with caplog.at_level("WARNING"):
            passwords = await source.get()

        assert passwords == ("a1", "b2", "c3")
        assert "truncating" in caplog.text

    @pytest.mark.asyncio
    @respx.mock
    async def test_contains_is_case_insensitive(self, source):
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        assert await source.contains("DRAGON")
        assert await source.contains("dragon")
        assert not await source.contains("dragon2")

    @pytest.mark.asyncio
    async def test_peek_before_load(self, source):
        """Test that peek never loads."""
        assert source.peek() is None
        assert source.cache_status() is None


class TestFallback:
    """Tests for falling back to the built-in list."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error(self, source, caplog):
        """Test that a transport failure yields the built-in list."""
        respx.get(LIST_URL).mock(side_effect=httpx.ConnectError("refused"))

        with caplog.at_level("WARNING"):
            passwords = await source.get()

        assert passwords == COMMON_PASSWORDS_FALLBACK
        assert source.cache_status().source == FallbackSource.NAME
        assert "using built-in list" in caplog.text

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found(self, source):
        respx.get(LIST_URL).mock(return_value=httpx.Response(404))

        assert await source.get() == COMMON_PASSWORDS_FALLBACK

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            ["password", "qwerty"],
            {"version": "1.0"},
            {"passwords": "password"},
            {"passwords": []},
            {"passwords": ["", "   ", 7]},
        ],
    )
    async def test_invalid_payload(self, source, body):
        """Test that a payload without usable passwords yields the built-in list."""
        with respx.mock:
            respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=body))
            assert await source.get() == COMMON_PASSWORDS_FALLBACK
        assert source.cache_status().source == FallbackSource.NAME

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_json(self, source):
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, text="{not json"))

        assert await source.get() == COMMON_PASSWORDS_FALLBACK

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_disabled_makes_no_request(self, http_client, clock):
        """Test that disabled loading returns the built-in list without I/O."""
        source = make_source(http_client, clock, enabled=False)
        route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        assert await source.get() == COMMON_PASSWORDS_FALLBACK
        assert route.call_count == 0

    @pytest.mark.asyncio
    async def test_no_file_path(self, http_client, clock):
        source = make_source(http_client, clock, file_path=None)

        assert await source.get() == COMMON_PASSWORDS_FALLBACK

    @pytest.mark.asyncio
    async def test_fallback_respects_max_entries(self, http_client, clock):
        """Test that the built-in list is capped at max_cache_entries too."""
        source = make_source(http_client, clock, enabled=False, max_cache_entries=50)

        passwords = await source.get()

        assert len(passwords) == 50
        assert passwords == COMMON_PASSWORDS_FALLBACK[:50]

    @pytest.mark.asyncio
    @respx.mock
    async def test_fallback_expires_sooner(self, source, clock):
        """Test that after a failure the real list is retried once the fallback TTL passes."""
        route = respx.get(LIST_URL).mock(
            side_effect=[
                httpx.ConnectError("refused"),
                httpx.Response(200, json=list_payload(["dragon"])),
            ]
        )

        assert await source.get() == COMMON_PASSWORDS_FALLBACK
        clock.advance(299)
        assert await source.get() == COMMON_PASSWORDS_FALLBACK
        assert route.call_count == 1

        clock.advance(2)
        assert source.cache_status().is_expired
        assert await source.get() == ("dragon",)
        assert route.call_count == 2


class TestCaching:
    """Tests for TTL caching and shared loads."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_cached_within_ttl(self, source, clock):
        route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        await source.get()
        clock.advance(59)
        await source.get()

        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_refetched_after_ttl(self, source, clock):
        route = respx.get(LIST_URL).mock(
            side_effect=[
                httpx.Response(200, json=list_payload(["dragon"])),
                httpx.Response(200, json=list_payload(["shadow"], version="2.2.0")),
            ]
        )

        await source.get()
        clock.advance(61)
        # Expired entries stay visible to peek until replaced
        assert source.peek() == ("dragon",)
        assert await source.get() == ("shadow",)
        assert source.cache_status().version == "2.2.0"
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_concurrent_gets_share_one_load(self, source):
        """Test that concurrent get() calls trigger exactly one fetch."""
        route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        results = await asyncio.gather(*(source.get() for _ in range(5)))

        assert route.call_count == 1
        assert all(result == ("dragon",) for result in results)

    @pytest.mark.asyncio
    @respx.mock
    async def test_reload_bypasses_cache(self, source):
        route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_payload(["dragon"])))

        await source.get()
        await source.reload()

        assert route.call_count == 2

    @pytest.mark.asyncio
    async def test_close_owned_client(self, common_settings):
        source = LocalCommonPasswordSource(common_settings)
        await source.close()
        assert source.client.is_closed
