"""SHA-1 password hasher for the k-anonymity range protocol."""

import hashlib
import logging
from shared.interfaces.password_hasher import PasswordHasher
from shared.domain.consts import HashAlgorithm
from shared.domain.errors import CryptoUnavailable

logger = logging.getLogger(__name__)


class Sha1PasswordHasher(PasswordHasher):
    """SHA-1 over UTF-8 bytes, rendered as 40 uppercase hex characters.

    SHA-1 is used here only as a lookup key for the range service, not to
    protect stored credentials, so the digest is requested with
    usedforsecurity=False. FIPS-restricted builds may still refuse it.
    """

    def __init__(self) -> None:
        """
        Resolve the digest constructor once.

        Raises:
            CryptoUnavailable: If the platform provides no SHA-1 primitive.
        """
        try:
            hashlib.new(HashAlgorithm.SHA1, usedforsecurity=False)
        except (ValueError, TypeError) as e:
            logger.error(f"SHA-1 digest unavailable on this platform: {e}")
            raise CryptoUnavailable(f"SHA-1 digest unavailable: {e}") from e

    @property
    def algorithm(self) -> str:
        return HashAlgorithm.SHA1

    def hash(self, password: str) -> str:
        digest = hashlib.new(HashAlgorithm.SHA1, usedforsecurity=False)
        digest.update(password.encode("utf-8"))
        return digest.hexdigest().upper()
