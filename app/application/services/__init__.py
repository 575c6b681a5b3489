"""Application services module.

Core business logic services, independent of storage and transport.
"""
from app.application.services.flight_search_service import FlightSearchService, SortKey
from app.application.services.booking_service import BookingService
from app.application.services.authentication_service import AuthenticationService

__all__ = [
    "FlightSearchService",
    "SortKey",
    "BookingService",
    "AuthenticationService",
]
