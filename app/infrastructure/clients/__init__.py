"""External API clients module."""
from app.infrastructure.clients.flight_api_client import (
    FlightAPIClient,
    FlightAPIError,
    RequestInProgressError,
)

__all__ = [
    "FlightAPIClient",
    "FlightAPIError",
    "RequestInProgressError",
]
