"""Factory for creating password hasher instances."""

from shared.interfaces.password_hasher import PasswordHasher
from shared.implementations.hashers import Sha1PasswordHasher
from shared.domain.consts import HashAlgorithm


HASHERS: dict[str, type[PasswordHasher]] = {
    HashAlgorithm.SHA1: Sha1PasswordHasher,
}


def create_hasher(algorithm: str = HashAlgorithm.SHA1) -> PasswordHasher:
    """Factory for creating password hashers.

    Call once at startup and inject the result.

    Returns:
        PasswordHasher instance

    Raises:
        ValueError: If algorithm is unknown
        CryptoUnavailable: If the platform lacks the digest primitive
    """
    try:
        hasher_cls = HASHERS[algorithm.lower()]
    except KeyError:
        raise ValueError(f"Unknown hash algorithm: {algorithm}")
    return hasher_cls()
