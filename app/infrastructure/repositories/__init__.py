"""Repository implementations (Infrastructure Layer).

These implement domain interfaces defined in app.domain.interfaces.
"""
from app.infrastructure.repositories.flight_catalog import JsonFlightCatalog
from app.infrastructure.repositories.booking_repository import InMemoryBookingRepository
from app.infrastructure.repositories.account_repository import InMemoryAccountRepository
from app.infrastructure.repositories.session_storage import FileSessionStorage

__all__ = [
    "JsonFlightCatalog",
    "InMemoryBookingRepository",
    "InMemoryAccountRepository",
    "FileSessionStorage",
]
