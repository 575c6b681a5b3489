"""Domain entities - core business objects."""
from app.domain.entities.flight import Flight, FlightDetails, Aircraft, Airline
from app.domain.entities.booking import Booking, BookingStatus
from app.domain.entities.account import Account, PublicAccount, AuthResult

__all__ = [
    "Flight",
    "FlightDetails",
    "Aircraft",
    "Airline",
    "Booking",
    "BookingStatus",
    "Account",
    "PublicAccount",
    "AuthResult",
]
