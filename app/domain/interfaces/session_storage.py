"""Interface for client-side session storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class ISessionStorage(ABC):
    """Interface for storing the signed-in user's profile and token."""

    @abstractmethod
    def load(self) -> Optional[Dict[str, Any]]:
        """
        Retrieve stored session data.

        Returns:
            Dictionary with ``user`` and ``token`` keys, or None if absent

        Raises:
            ValueError: If stored data cannot be parsed
        """
        pass

    @abstractmethod
    def save(self, data: Dict[str, Any]) -> None:
        """
        Store session data, replacing anything stored before.

        Args:
            data: Dictionary with ``user`` and ``token`` keys
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete stored session data (profile and token together)."""
        pass
