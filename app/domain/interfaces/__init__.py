"""Domain interfaces following Dependency Inversion Principle."""

from app.domain.interfaces.flight_catalog import IFlightCatalog
from app.domain.interfaces.booking_repository import IBookingRepository
from app.domain.interfaces.account_repository import IAccountRepository
from app.domain.interfaces.password_hasher import IPasswordHasher
from app.domain.interfaces.session_storage import ISessionStorage

__all__ = [
    "IFlightCatalog",
    "IBookingRepository",
    "IAccountRepository",
    "IPasswordHasher",
    "ISessionStorage",
]
