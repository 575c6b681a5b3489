"""In-memory booking ledger implementation."""
import logging
from threading import Lock
from typing import Dict, List, Optional, Tuple

from app.domain.entities.booking import Booking, BookingStatus
from app.domain.interfaces.booking_repository import IBookingRepository


class InMemoryBookingRepository(IBookingRepository):
    """
    Booking ledger kept in process memory.

    All access goes through a single lock. Contents are lost on restart.
    """
    
    def __init__(self):
        """Initialize an empty ledger."""
        self._bookings: Dict[str, Booking] = {}  # insertion ordered
        self._lock = Lock()
        self._logger = logging.getLogger(__name__)
    
    def add(self, booking: Booking) -> Booking:
        with self._lock:
            if booking.booking_id in self._bookings:
                raise ValueError(f"Duplicate booking id: {booking.booking_id}")
            self._bookings[booking.booking_id] = booking
        self._logger.debug(f"Ledger append {booking.booking_id}")
        return booking
    
    def get(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            return self._bookings.get(booking_id)
    
    def update_status(self, booking_id: str, status: BookingStatus) -> Optional[Tuple[Booking, BookingStatus]]:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            previous, booking.status = booking.status, status
            return booking, previous
    
    def list_by_user(self, user_id: str) -> List[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.user_id == user_id]
    
    def count(self) -> int:
        with self._lock:
            return len(self._bookings)
