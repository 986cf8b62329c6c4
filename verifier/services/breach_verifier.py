"""Breach verifier combining the remote range lookup with the local list."""

import logging
from typing import Optional
import httpx
from shared.config.common_passwords import COMMON_PASSWORDS_FALLBACK
from shared.config.settings import CommonPasswordsSettings, RangeQuerySettings, build_settings
from shared.domain.consts import BreachSource, Warnings
from shared.domain.errors import CryptoUnavailable
from shared.domain.models import BreachOutcome
from shared.factories.hasher_factory import create_hasher
from shared.interfaces.password_hasher import PasswordHasher
from verifier.infrastructure.clock import Clock
from verifier.infrastructure.common_passwords import LocalCommonPasswordSource
from verifier.infrastructure.range_client import RangeQueryClient

logger = logging.getLogger(__name__)


class BreachVerifier:
    """
    Decides whether a password is compromised.

    The local list is always consulted. The remote range lookup is the
    primary verdict when enabled; if it fails for any reason the local
    verdict is returned instead, with the failure as a warning. check()
    never raises for remote failures.
    """

    def __init__(
        self,
        local_source: LocalCommonPasswordSource,
        range_client: Optional[RangeQueryClient],
        remote_enabled: bool = True,
    ) -> None:
        """
        Initialize verifier.

        range_client may be None when no hasher could be resolved; remote
        checks then degrade to local-only verdicts.
        """
        self.local_source = local_source
        self.range_client = range_client
        self.remote_enabled = remote_enabled

    @classmethod
    def create(
        cls,
        range_settings: Optional[RangeQuerySettings] = None,
        common_settings: Optional[CommonPasswordsSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Clock] = None,
        hasher: Optional[PasswordHasher] = None,
    ) -> "BreachVerifier":
        """
        Build a verifier and its collaborators from settings.

        The hasher is resolved here, once. If the platform has no SHA-1,
        the verifier is still built and answers from the local list.

        Raises:
            ConfigError: If default settings from the environment are invalid.
        """
        range_settings = range_settings or build_settings(RangeQuerySettings)
        common_settings = common_settings or build_settings(CommonPasswordsSettings)
        clock = clock or Clock()

        local_source = LocalCommonPasswordSource(common_settings, http_client=http_client, clock=clock)

        range_client: Optional[RangeQueryClient] = None
        if hasher is None:
            try:
                hasher = create_hasher()
            except CryptoUnavailable as e:
                logger.error(f"Remote breach checks unavailable: {e}")
        if hasher is not None:
            range_client = RangeQueryClient(range_settings, hasher=hasher, http_client=http_client, clock=clock)

        return cls(local_source, range_client, remote_enabled=range_settings.enabled)

    async def check(self, password: str) -> BreachOutcome:
        """
        Check password against the local list and, if enabled, the range service.

        Returns:
            BreachOutcome. source is REMOTE for verdicts backed by a
            successful remote lookup, LOCAL for local hits and degraded
            verdicts.
        """
        locally_compromised = await self._is_locally_compromised(password)

        if not self.remote_enabled:
            return BreachOutcome(
                compromised=locally_compromised,
                source=BreachSource.LOCAL if locally_compromised else BreachSource.REMOTE,
                warning=Warnings.REMOTE_DISABLED,
            )

        try:
            if self.range_client is None:
                raise CryptoUnavailable(Warnings.HASHER_UNAVAILABLE)
            occurrences = await self.range_client.lookup(password)
        except Exception as e:
            warning = str(e) or Warnings.UNKNOWN_REMOTE_ERROR
            logger.warning(f"Falling back to local password breach list: {warning}")
            return BreachOutcome(
                compromised=locally_compromised,
                source=BreachSource.LOCAL,
                warning=warning,
            )

        if occurrences is not None:
            return BreachOutcome(compromised=True, source=BreachSource.REMOTE, occurrences=occurrences)

        if locally_compromised:
            return BreachOutcome(compromised=True, source=BreachSource.LOCAL)

        return BreachOutcome(compromised=False, source=BreachSource.REMOTE)

    async def _is_locally_compromised(self, password: str) -> bool:
        try:
            return await self.local_source.contains(password)
        except Exception as e:
            logger.error(f"Local password list unavailable, using built-in list: {e}", exc_info=True)
            return password.lower() in COMMON_PASSWORDS_FALLBACK

    async def close(self) -> None:
        """Close owned HTTP clients."""
        if self.range_client is not None:
            await self.range_client.close()
        await self.local_source.close()

    async def __aenter__(self) -> "BreachVerifier":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
