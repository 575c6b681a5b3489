"""Booking ledger service: create, cancel and list bookings."""
import logging
import time
import uuid
from typing import Callable, List, Optional

from app.domain.entities.booking import Booking, BookingStatus
from app.domain.exceptions import NotFoundError, ValidationError
from app.domain.interfaces.account_repository import IAccountRepository
from app.domain.interfaces.booking_repository import IBookingRepository
from app.domain.interfaces.flight_catalog import IFlightCatalog


logger = logging.getLogger(__name__)


def generate_booking_number(clock: Callable[[], float] = time.time) -> str:
    """Human-readable booking number from the current epoch milliseconds."""
    return f"BK{int(clock() * 1000)}"


class BookingService:
    """
    Service for booking flights from the catalog.
    
    The ledger is append-only: bookings are never removed, only
    moved from CONFIRMED to CANCELLED. Seat counts in the catalog
    are not decremented.
    """
    
    def __init__(
        self,
        catalog: IFlightCatalog,
        repository: IBookingRepository,
        accounts: Optional[IAccountRepository] = None,
        enforce_account: bool = False,
        on_created: Optional[Callable[[Booking], None]] = None,
        on_cancelled: Optional[Callable[[Booking], None]] = None,
    ):
        """
        Initialize booking service.
        
        Args:
            catalog: Flight catalog used to resolve flight identifiers
            repository: Booking ledger (Dependency Injection)
            accounts: Account directory used when ``enforce_account`` is set
            enforce_account: Reject bookings for unknown user identifiers
            on_created: Optional hook called after a booking is stored
            on_cancelled: Optional hook called after a booking is cancelled
        """
        if enforce_account and accounts is None:
            raise ValueError("enforce_account requires an account repository")
        self.catalog = catalog
        self.repository = repository
        self.accounts = accounts
        self.enforce_account = enforce_account
        self._on_created = on_created
        self._on_cancelled = on_cancelled
        self._logger = logging.getLogger(__name__)
    
    def create_booking(
        self,
        flight_id: str,
        user_id: str,
        passengers: int,
        travel_class: str,
        departure_date: str,
    ) -> Booking:
        """
        Book a catalog flight.
        
        Args:
            flight_id: Catalog flight identifier
            user_id: Owning user identifier (not checked unless enforced)
            passengers: Number of passengers (at least 1)
            travel_class: Free-form travel class
            departure_date: Requested departure date as given by the caller
            
        Returns:
            The new CONFIRMED booking
            
        Raises:
            NotFoundError: If the flight (or, when enforced, the user) does not exist
            ValidationError: If ``passengers`` is less than 1
        """
        flight = self.catalog.get(flight_id)
        if flight is None:
            self._logger.warning(f"Booking rejected: flight {flight_id} not found")
            raise NotFoundError("Flight not found")
        
        if self.enforce_account and not self.accounts.exists(user_id):
            self._logger.warning(f"Booking rejected: user {user_id} not found")
            raise NotFoundError("User not found")
        
        if passengers < 1:
            raise ValidationError("Passengers must be at least 1")
        
        booking = Booking(
            booking_id=str(uuid.uuid4()),
            booking_number=generate_booking_number(),
            user_id=user_id,
            flight=flight,
            passengers=passengers,
            travel_class=travel_class,
            departure_date=departure_date,
            total_price=flight.price * passengers,
            status=BookingStatus.CONFIRMED,
        )
        self.repository.add(booking)
        
        self._logger.info(
            f"Booking {booking.booking_number} created: flight={flight_id} "
            f"user={user_id} passengers={passengers} total={booking.total_price}"
        )
        if self._on_created:
            self._on_created(booking)
        return booking
    
    def cancel_booking(self, booking_id: str) -> Booking:
        """
        Cancel a booking. Cancelling twice is allowed and changes nothing.
        
        Args:
            booking_id: Booking identifier
            
        Returns:
            The booking with status CANCELLED
            
        Raises:
            NotFoundError: If the booking does not exist
        """
        updated = self.repository.update_status(booking_id, BookingStatus.CANCELLED)
        if updated is None:
            self._logger.warning(f"Cancel rejected: booking {booking_id} not found")
            raise NotFoundError("Booking not found")

        booking, previous = updated
        if previous is BookingStatus.CANCELLED:
            self._logger.info(f"Booking {booking.booking_number} already cancelled")
        else:
            self._logger.info(f"Booking {booking.booking_number} cancelled")
            if self._on_cancelled:
                self._on_cancelled(booking)
        return booking
    
    def list_user_bookings(self, user_id: str) -> List[Booking]:
        """
        List every booking owned by a user, in ledger order.
        
        Args:
            user_id: Owning user identifier
            
        Returns:
            Bookings including cancelled ones
        """
        return self.repository.list_by_user(user_id)
    
    def count(self) -> int:
        return self.repository.count()
