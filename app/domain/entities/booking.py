"""Booking ledger entities."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from app.domain.entities.flight import Flight


class BookingStatus(str, Enum):
    """Booking status; transitions only CONFIRMED -> CANCELLED."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


@dataclass
class Booking:
    """Domain entity representing a flight booking."""

    booking_id: str
    booking_number: str
    user_id: str
    flight: Flight
    passengers: int
    travel_class: str
    departure_date: str
    total_price: int
    status: BookingStatus = BookingStatus.CONFIRMED
    booking_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate booking entity."""
        if not self.booking_id:
            raise ValueError("booking_id is required")
        if self.passengers <= 0:
            raise ValueError("passengers must be positive")
        if self.total_price < 0:
            raise ValueError("total_price must be non-negative")
        if not isinstance(self.status, BookingStatus):
            self.status = BookingStatus(self.status)

    @property
    def is_cancelled(self) -> bool:
        return self.status is BookingStatus.CANCELLED

    @property
    def booking_date_iso(self) -> str:
        """Creation timestamp as ISO 8601 with millisecond precision."""
        return self.booking_date.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
