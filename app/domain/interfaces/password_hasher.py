"""Interface for credential verification (Strategy Pattern)."""
from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Turns secrets into one-way hashes and verifies them."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Args:
            password: Plain-text secret

        Returns:
            Encoded hash safe to store
        """
        pass

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """
        Check a secret against a stored hash.

        Args:
            password_hash: Value previously returned by ``hash``
            password: Plain-text secret to check

        Returns:
            True if verified, False if rejected
        """
        pass
