"""Abstract password hasher interface."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Abstract password hasher interface.

    All hashers must implement:
    - hash: Digest a password into uppercase hex
    - algorithm: Name of the digest algorithm

    Implementations resolve their digest primitive once, at construction,
    and raise CryptoUnavailable there if the platform lacks it.
    """

    @property
    @abstractmethod
    def algorithm(self) -> str:
        """Return the digest algorithm name."""
        pass

    @abstractmethod
    def hash(self, password: str) -> str:
        """Digest password.

        Args:
            password: Candidate password (never stored or logged)

        Returns:
            Uppercase hex digest of the UTF-8 encoded password
        """
        pass
