"""JSON-file flight catalog implementation."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from app.domain.entities.flight import Flight
from app.domain.interfaces.flight_catalog import IFlightCatalog


class JsonFlightCatalog(IFlightCatalog):
    """
    Flight catalog loaded once from a JSON array of flight records.

    The catalog is immutable after construction, so reads need no locking.
    """
    
    def __init__(self, flights: Iterable[Flight]):
        """
        Initialize catalog from already-built flights.
        
        Args:
            flights: Flights in catalog order
            
        Raises:
            ValueError: If two flights share an identifier
        """
        self._flights: List[Flight] = list(flights)
        self._by_id: Dict[str, Flight] = {}
        for flight in self._flights:
            if flight.flight_id in self._by_id:
                raise ValueError(f"Duplicate flight id in catalog: {flight.flight_id}")
            self._by_id[flight.flight_id] = flight
        self._logger = logging.getLogger(__name__)
    
    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "JsonFlightCatalog":
        """Build a catalog from decoded JSON records."""
        if not isinstance(records, list):
            raise ValueError("Flight catalog must be a JSON array")
        return cls(Flight.from_dict(record) for record in records)
    
    @classmethod
    def from_file(cls, path: str) -> "JsonFlightCatalog":
        """
        Load a catalog from a JSON file.
        
        Args:
            path: Path to the catalog file
            
        Returns:
            Loaded catalog
            
        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not a valid catalog
        """
        with Path(path).open("r", encoding="utf-8") as f:
            records = json.load(f)
        
        catalog = cls.from_records(records)
        logging.getLogger(__name__).info(f"Loaded {len(catalog)} flights from {path}")
        return catalog
    
    def all(self) -> List[Flight]:
        return list(self._flights)
    
    def get(self, flight_id: str) -> Optional[Flight]:
        return self._by_id.get(flight_id)
    
    def __len__(self) -> int:
        return len(self._flights)
