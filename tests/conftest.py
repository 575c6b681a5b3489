"""Shared fixtures: a small catalog, services and a Flask test client."""
import json

import pytest

from app import create_app
from app.application.services.authentication_service import AuthenticationService
from app.application.services.booking_service import BookingService
from app.application.services.flight_search_service import FlightSearchService
from app.config.settings import TestingConfig
from app.infrastructure.repositories.account_repository import InMemoryAccountRepository
from app.infrastructure.repositories.booking_repository import InMemoryBookingRepository
from app.infrastructure.repositories.flight_catalog import JsonFlightCatalog
from app.infrastructure.security.password_hasher import WerkzeugPasswordHasher
from app.infrastructure.service_container import ServiceContainer


FLIGHT_RECORDS = [
    {"id": "1", "airline": "British Airways", "from": "New York", "to": "London",
     "departureDate": "2024-06-01", "departureTime": "08:00",
     "arrivalDate": "2024-06-01", "arrivalTime": "20:00",
     "duration": "7h 0m", "price": 500, "availableSeats": 10},
    {"id": "2", "airline": "Virgin Atlantic", "from": "London", "to": "New York",
     "departureDate": "2024-06-05", "departureTime": "09:30",
     "arrivalDate": "2024-06-05", "arrivalTime": "12:45",
     "duration": "8h 15m", "price": 650, "availableSeats": 4},
    {"id": "3", "airline": "Delta Air Lines", "from": "New York", "to": "London",
     "departureDate": "2024-06-10", "departureTime": "18:45",
     "arrivalDate": "2024-06-11", "arrivalTime": "06:40",
     "duration": "6h 55m", "price": 450, "availableSeats": 0},
    {"id": "4", "airline": "Air France", "from": "Paris", "to": "Tokyo",
     "departureDate": "2024-06-02", "departureTime": "23:00",
     "arrivalDate": "2024-06-03", "arrivalTime": "19:05",
     "duration": "13h 5m", "price": 900, "availableSeats": 25},
    {"id": "5", "airline": "Air France", "from": "New York", "to": "Paris",
     "departureDate": "2024-06-01", "departureTime": "06:15",
     "arrivalDate": "2024-06-01", "arrivalTime": "19:30",
     "duration": "overnight", "price": 500, "availableSeats": 3},
    {"id": "6", "airline": "British Airways", "from": "Boston", "to": "London",
     "departureDate": "not-a-date", "departureTime": "10:00",
     "arrivalDate": "not-a-date", "arrivalTime": "21:30",
     "duration": "6h 30m", "price": 480, "availableSeats": 7},
]


def ids(flights):
    return [f.flight_id for f in flights]


@pytest.fixture
def catalog():
    return JsonFlightCatalog.from_records(FLIGHT_RECORDS)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps(FLIGHT_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def password_hasher():
    # Low iteration count keeps the suite fast
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.fixture
def search_service(catalog):
    return FlightSearchService(catalog)


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def account_repository():
    return InMemoryAccountRepository()


@pytest.fixture
def booking_service(catalog, booking_repository, account_repository):
    return BookingService(catalog, booking_repository, accounts=account_repository)


@pytest.fixture
def auth_service(account_repository, password_hasher):
    return AuthenticationService(account_repository, password_hasher)


@pytest.fixture
def config_class(catalog_file):
    return type("CatalogTestingConfig", (TestingConfig,), {"FLIGHTS_DATA_PATH": str(catalog_file)})


@pytest.fixture
def app(config_class, password_hasher):
    container = ServiceContainer(config_class, password_hasher=password_hasher)
    return create_app(config_class, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def graphql(client):
    """Post a GraphQL document and return the decoded body."""
    def run(document, **variables):
        response = client.post("/graphql", json={"query": document, "variables": variables})
        return response.get_json()
    return run
