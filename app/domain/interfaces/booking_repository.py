"""Interface for booking storage (Repository Pattern).

Allows a durable backend to replace the in-memory ledger
without touching the booking service.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.entities.booking import Booking, BookingStatus


class IBookingRepository(ABC):
    """Append-only booking ledger with status updates."""

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """
        Append a booking to the ledger.

        Args:
            booking: Booking to store

        Returns:
            The stored booking
        """
        pass

    @abstractmethod
    def get(self, booking_id: str) -> Optional[Booking]:
        """
        Retrieve a booking.

        Args:
            booking_id: Unique booking identifier

        Returns:
            Booking if found, None otherwise
        """
        pass

    @abstractmethod
    def update_status(self, booking_id: str, status: BookingStatus) -> Optional[Tuple[Booking, BookingStatus]]:
        """
        Set the status of a booking.

        Reading the previous status and writing the new one is a single
        atomic step.

        Args:
            booking_id: Unique booking identifier
            status: New status

        Returns:
            (updated booking, previous status), or None if the booking does not exist
        """
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> List[Booking]:
        """
        List a user's bookings in insertion order, cancelled ones included.

        Args:
            user_id: Owning user identifier

        Returns:
            List of bookings (possibly empty)
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of bookings in the ledger."""
        pass
