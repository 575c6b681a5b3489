"""Tests for loading the JSON flight catalog."""
import json

import pytest

from app.domain.entities.flight import Flight
from app.infrastructure.repositories.flight_catalog import JsonFlightCatalog
from tests.conftest import FLIGHT_RECORDS


def test_from_file_keeps_catalog_order(catalog_file):
    catalog = JsonFlightCatalog.from_file(str(catalog_file))

    assert len(catalog) == len(FLIGHT_RECORDS)
    assert [f.flight_id for f in catalog.all()] == [r["id"] for r in FLIGHT_RECORDS]


def test_get_resolves_by_id(catalog):
    flight = catalog.get("1")

    assert flight.origin == "New York"
    assert flight.destination == "London"
    assert flight.departure == "2024-06-01 08:00"
    assert flight.arrival == "2024-06-01 20:00"
    assert catalog.get("missing") is None


def test_all_returns_a_copy(catalog):
    flights = catalog.all()
    flights.clear()

    assert len(catalog.all()) == len(FLIGHT_RECORDS)


def test_flights_are_immutable(catalog):
    with pytest.raises(AttributeError):
        catalog.get("1").price = 1


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate flight id"):
        JsonFlightCatalog.from_records([FLIGHT_RECORDS[0], FLIGHT_RECORDS[0]])


def test_missing_field_is_rejected():
    record = dict(FLIGHT_RECORDS[0])
    del record["price"]

    with pytest.raises(ValueError, match="price"):
        JsonFlightCatalog.from_records([record])


def test_negative_seat_count_is_rejected():
    record = dict(FLIGHT_RECORDS[0], availableSeats=-1)

    with pytest.raises(ValueError):
        Flight.from_dict(record)


@pytest.mark.parametrize("field, value", [
    ("departureDate", 20240601),
    ("arrivalTime", None),
    ("duration", None),
    ("airline", 42),
])
def test_non_string_text_fields_are_rejected(field, value):
    record = dict(FLIGHT_RECORDS[0], **{field: value})

    with pytest.raises(ValueError, match="must be a string"):
        JsonFlightCatalog.from_records([record])


def test_non_array_file_is_rejected(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps({"flights": FLIGHT_RECORDS}), encoding="utf-8")

    with pytest.raises(ValueError, match="JSON array"):
        JsonFlightCatalog.from_file(str(path))


def test_bundled_catalog_loads():
    from app.config.settings import Config

    catalog = JsonFlightCatalog.from_file(Config.FLIGHTS_DATA_PATH)

    assert len(catalog) > 0


def test_to_dict_round_trips_catalog_fields():
    assert Flight.from_dict(FLIGHT_RECORDS[1]).to_dict() == FLIGHT_RECORDS[1]
