"""In-memory account directory implementation."""
import logging
from threading import Lock
from typing import Dict, Optional

from app.domain.entities.account import Account
from app.domain.interfaces.account_repository import IAccountRepository


class InMemoryAccountRepository(IAccountRepository):
    """
    Account directory kept in process memory, keyed by exact email.

    The email check and insert share one lock acquisition.
    """
    
    def __init__(self):
        """Initialize an empty directory."""
        self._by_email: Dict[str, Account] = {}
        self._by_id: Dict[str, Account] = {}
        self._lock = Lock()
        self._logger = logging.getLogger(__name__)
    
    def add_if_absent(self, account: Account) -> bool:
        with self._lock:
            if account.email in self._by_email:
                return False
            self._by_email[account.email] = account
            self._by_id[account.account_id] = account
        return True
    
    def get_by_email(self, email: str) -> Optional[Account]:
        with self._lock:
            return self._by_email.get(email)
    
    def get_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            return self._by_id.get(account_id)
    
    def count(self) -> int:
        with self._lock:
            return len(self._by_email)
