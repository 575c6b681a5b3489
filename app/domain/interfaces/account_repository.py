"""Interface for account storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.account import Account


class IAccountRepository(ABC):
    """Account directory keyed by email."""

    @abstractmethod
    def add_if_absent(self, account: Account) -> bool:
        """
        Store an account unless its email is already registered.

        The check and the insert must be atomic.

        Args:
            account: Account to store

        Returns:
            True if stored, False if the email was taken
        """
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Account]:
        """
        Exact-match lookup by email.

        Args:
            email: Email as stored (no case folding)

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Look up an account by identifier."""
        pass

    def exists(self, account_id: str) -> bool:
        """Check whether an account identifier is registered."""
        return self.get_by_id(account_id) is not None

    @abstractmethod
    def count(self) -> int:
        """Number of registered accounts."""
        pass
