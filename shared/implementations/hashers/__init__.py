"""Password hasher implementations.

This package contains concrete implementations of password hashers.
"""

from shared.implementations.hashers.sha1 import Sha1PasswordHasher

__all__ = ["Sha1PasswordHasher"]
