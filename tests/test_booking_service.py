"""Tests for the booking ledger service."""
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.application.services.booking_service import BookingService, generate_booking_number
from app.domain.entities.account import Account
from app.domain.entities.booking import BookingStatus
from app.domain.exceptions import NotFoundError, ValidationError


def book(service, flight_id="1", user_id="user-1", passengers=2):
    return service.create_booking(
        flight_id=flight_id,
        user_id=user_id,
        passengers=passengers,
        travel_class="economy",
        departure_date="2024-06-03",
    )


def test_create_booking_confirms_and_prices(booking_service, booking_repository):
    booking = book(booking_service)

    assert booking.status is BookingStatus.CONFIRMED
    assert booking.total_price == 1000
    assert booking.flight.flight_id == "1"
    assert booking.travel_class == "economy"
    assert booking.departure_date == "2024-06-03"
    assert re.fullmatch(r"BK\d+", booking.booking_number)
    assert booking_repository.count() == 1
    assert booking_repository.get(booking.booking_id) is booking


def test_booking_date_is_iso_utc(booking_service):
    booking = book(booking_service)

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", booking.booking_date_iso)


def test_each_booking_gets_a_fresh_id(booking_service):
    first = book(booking_service)
    second = book(booking_service)

    assert first.booking_id != second.booking_id


def test_unknown_flight_leaves_ledger_unchanged(booking_service, booking_repository):
    book(booking_service)
    before = booking_repository.count()

    with pytest.raises(NotFoundError, match="Flight not found"):
        book(booking_service, flight_id="missing")

    assert booking_repository.count() == before


@pytest.mark.parametrize("passengers", [0, -3])
def test_passenger_count_must_be_positive(booking_service, booking_repository, passengers):
    with pytest.raises(ValidationError, match="Passengers must be at least 1"):
        book(booking_service, passengers=passengers)

    assert booking_repository.count() == 0


def test_seats_and_unknown_users_are_not_checked_by_default(booking_service, catalog):
    # flight 3 has no seats left and nobody registered "ghost"
    booking = book(booking_service, flight_id="3", user_id="ghost", passengers=50)

    assert booking.total_price == 450 * 50
    assert catalog.get("3").available_seats == 0


def test_enforced_account_check(catalog, booking_repository, account_repository):
    service = BookingService(catalog, booking_repository, accounts=account_repository, enforce_account=True)
    account_repository.add_if_absent(Account("user-1", "Ada", "ada@example.com", "hash"))

    with pytest.raises(NotFoundError, match="User not found"):
        book(service, user_id="ghost")
    assert booking_repository.count() == 0

    assert book(service, user_id="user-1").user_id == "user-1"


def test_enforced_account_check_needs_a_directory(catalog, booking_repository):
    with pytest.raises(ValueError):
        BookingService(catalog, booking_repository, enforce_account=True)


def test_cancel_is_idempotent(booking_service):
    booking = book(booking_service)

    first = booking_service.cancel_booking(booking.booking_id)
    second = booking_service.cancel_booking(booking.booking_id)

    assert first.status is BookingStatus.CANCELLED
    assert second.status is BookingStatus.CANCELLED
    assert second.booking_id == booking.booking_id


def test_cancel_unknown_booking(booking_service):
    with pytest.raises(NotFoundError, match="Booking not found"):
        booking_service.cancel_booking("missing")


def test_hooks_fire_once_per_transition(catalog, booking_repository):
    created, cancelled = [], []
    service = BookingService(
        catalog, booking_repository, on_created=created.append, on_cancelled=cancelled.append,
    )

    booking = book(service)
    service.cancel_booking(booking.booking_id)
    service.cancel_booking(booking.booking_id)

    assert created == [booking]
    assert cancelled == [booking]


def test_list_user_bookings_in_ledger_order_including_cancelled(booking_service):
    first = book(booking_service, flight_id="1", user_id="ada")
    book(booking_service, flight_id="2", user_id="grace")
    third = book(booking_service, flight_id="4", user_id="ada")
    booking_service.cancel_booking(first.booking_id)

    bookings = booking_service.list_user_bookings("ada")

    assert [b.booking_id for b in bookings] == [first.booking_id, third.booking_id]
    assert [b.status for b in bookings] == [BookingStatus.CANCELLED, BookingStatus.CONFIRMED]
    assert booking_service.list_user_bookings("nobody") == []


def test_duplicate_bookings_are_allowed(booking_service):
    book(booking_service)
    book(booking_service)

    assert len(booking_service.list_user_bookings("user-1")) == 2


def test_concurrent_bookings_are_all_recorded(booking_service):
    with ThreadPoolExecutor(max_workers=8) as pool:
        bookings = list(pool.map(lambda i: book(booking_service, user_id=f"user-{i % 3}"), range(60)))

    assert booking_service.count() == 60
    assert len({b.booking_id for b in bookings}) == 60


def test_booking_number_uses_epoch_milliseconds():
    assert generate_booking_number(lambda: 1717200000.5) == "BK1717200000500"


def test_concurrent_cancels_fire_hook_once(catalog, booking_repository):
    cancelled = []
    service = BookingService(catalog, booking_repository, on_cancelled=cancelled.append)
    booking = book(service)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: service.cancel_booking(booking.booking_id), range(40)))

    assert {r.status for r in results} == {BookingStatus.CANCELLED}
    assert cancelled == [booking]


def test_update_status_reports_previous_status(booking_service, booking_repository):
    booking = book(booking_service)

    assert booking_repository.update_status(booking.booking_id, BookingStatus.CANCELLED) == (
        booking, BookingStatus.CONFIRMED,
    )
    assert booking_repository.update_status(booking.booking_id, BookingStatus.CANCELLED) == (
        booking, BookingStatus.CANCELLED,
    )
    assert booking_repository.update_status("missing", BookingStatus.CANCELLED) is None
