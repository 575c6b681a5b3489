"""Flight catalog entities."""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from app.utils.flight_utils import parse_calendar_date


@dataclass(frozen=True)
class Aircraft:
    """Aircraft descriptor attached to single-flight lookups."""

    model: str
    capacity: int


@dataclass(frozen=True)
class Flight:
    """Domain entity representing one catalog flight (immutable)."""

    flight_id: str
    airline: str
    origin: str
    destination: str
    departure_date: str
    departure_time: str
    arrival_date: str
    arrival_time: str
    duration: str
    price: int
    available_seats: int = 0

    def __post_init__(self):
        """Validate flight entity."""
        if not self.flight_id:
            raise ValueError("flight_id is required")
        if not self.airline:
            raise ValueError("airline is required")
        if not self.origin:
            raise ValueError("origin is required")
        if not self.destination:
            raise ValueError("destination is required")
        for name in ("airline", "origin", "destination", "departure_date", "departure_time",
                     "arrival_date", "arrival_time", "duration"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if not isinstance(self.price, int) or self.price < 0:
            raise ValueError("price must be a non-negative integer")
        if not isinstance(self.available_seats, int) or self.available_seats < 0:
            raise ValueError("available_seats must be a non-negative integer")

    @property
    def departure(self) -> str:
        """Display string combining departure date and time."""
        return f"{self.departure_date} {self.departure_time}"

    @property
    def arrival(self) -> str:
        """Display string combining arrival date and time."""
        return f"{self.arrival_date} {self.arrival_time}"

    @property
    def parsed_departure_date(self) -> Optional[date]:
        return parse_calendar_date(self.departure_date)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Flight":
        """
        Build a flight from a catalog record.

        Args:
            data: Record using the catalog field names (``from``, ``to``,
                ``departureDate``, ...)

        Returns:
            Flight instance

        Raises:
            ValueError: If a required field is missing or invalid
        """
        try:
            return cls(
                flight_id=str(data["id"]),
                airline=data["airline"],
                origin=data["from"],
                destination=data["to"],
                departure_date=data["departureDate"],
                departure_time=data["departureTime"],
                arrival_date=data["arrivalDate"],
                arrival_time=data["arrivalTime"],
                duration=data.get("duration", ""),
                price=data["price"],
                available_seats=data.get("availableSeats", 0),
            )
        except KeyError as e:
            raise ValueError(f"Flight record missing field {e.args[0]!r}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the catalog field names."""
        return {
            "id": self.flight_id,
            "airline": self.airline,
            "from": self.origin,
            "to": self.destination,
            "departureDate": self.departure_date,
            "departureTime": self.departure_time,
            "arrivalDate": self.arrival_date,
            "arrivalTime": self.arrival_time,
            "duration": self.duration,
            "price": self.price,
            "availableSeats": self.available_seats,
        }


@dataclass(frozen=True)
class Airline:
    """Airline derived from catalog flights; no airline registry exists."""

    airline_id: str
    name: str
    code: str
    logo: Optional[str] = None

    @classmethod
    def from_name(cls, index: int, name: str) -> "Airline":
        return cls(airline_id=str(index + 1), name=name, code=name[:3].upper())


@dataclass(frozen=True)
class FlightDetails:
    """Single-flight lookup result: the flight plus an aircraft descriptor.

    Attribute access falls through to the wrapped flight, so details can
    be used anywhere a ``Flight`` is read.
    """

    flight: Flight
    aircraft: Aircraft

    def __getattr__(self, name: str):
        if name in ("flight", "aircraft"):
            raise AttributeError(name)
        return getattr(self.flight, name)
