"""Interface for the read-only flight catalog (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.flight import Flight


class IFlightCatalog(ABC):
    """Read-only collection of flights, loaded once per process."""

    @abstractmethod
    def all(self) -> List[Flight]:
        """
        Return every flight in catalog order.

        Returns:
            List of flights (callers must not rely on mutating it)
        """
        pass

    @abstractmethod
    def get(self, flight_id: str) -> Optional[Flight]:
        """
        Look up a flight by identifier.

        Args:
            flight_id: Flight identifier

        Returns:
            Flight if found, None otherwise
        """
        pass

    def __len__(self) -> int:
        return len(self.all())
