"""Tests for the GraphQL API client, using a mocked HTTP session."""
import threading
from unittest.mock import MagicMock

import pytest
import requests

from app.infrastructure.clients.flight_api_client import (
    BOOK_FLIGHT,
    SEARCH_FLIGHTS,
    FlightAPIClient,
    FlightAPIError,
    RequestInProgressError,
)
from tests.conftest import FLIGHT_RECORDS


def make_response(body=None, status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("no JSON")
    else:
        response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return FlightAPIClient(api_url="http://api.test/graphql", timeout=5, session=session)


def test_search_flights_sends_only_given_variables(api, session):
    session.post.return_value = make_response({"data": {"flights": FLIGHT_RECORDS[:2]}})

    flights = api.search_flights(origin="New York", date_range=3)

    assert [f.flight_id for f in flights] == ["1", "2"]
    _, kwargs = session.post.call_args
    assert session.post.call_args[0][0] == "http://api.test/graphql"
    assert kwargs["json"] == {"query": SEARCH_FLIGHTS, "variables": {"from": "New York", "dateRange": 3}}
    assert kwargs["timeout"] == 5


def test_get_flight_builds_details(api, session):
    record = dict(FLIGHT_RECORDS[3], aircraft={"model": "Boeing 787", "capacity": 300})
    session.post.return_value = make_response({"data": {"flight": record}})

    details = api.get_flight("4")

    assert details.aircraft.model == "Boeing 787"
    assert details.airline == "Air France"
    assert details.flight.flight_id == "4"


def test_get_flight_unknown(api, session):
    session.post.return_value = make_response({"data": {"flight": None}})

    assert api.get_flight("999") is None


def test_get_airlines(api, session):
    session.post.return_value = make_response({"data": {"airlines": [
        {"id": "1", "name": "British Airways", "code": "BRI", "logo": None},
    ]}})

    airlines = api.get_airlines()

    assert airlines[0].code == "BRI"
    assert airlines[0].logo is None


def test_graphql_errors_raise_with_first_message(api, session):
    errors = [{"message": "Flight not found"}, {"message": "other"}]
    session.post.return_value = make_response({"data": {"bookFlight": None}, "errors": errors})

    with pytest.raises(FlightAPIError) as exc_info:
        api.book_flight("999", "user-1", 1, "economy", "2024-06-01")

    assert exc_info.value.message == "Flight not found"
    assert exc_info.value.errors == errors


def test_graphql_errors_win_over_http_status(api, session):
    session.post.return_value = make_response({"errors": [{"message": "Syntax Error"}]}, status_code=400)

    with pytest.raises(FlightAPIError, match="Syntax Error"):
        api.execute("{ broken")


def test_http_error_without_body_errors(api, session):
    session.post.return_value = make_response({"message": "Rate limit exceeded"}, status_code=429)

    with pytest.raises(requests.HTTPError):
        api.get_airlines()


def test_non_json_response(api, session):
    session.post.return_value = make_response(None, status_code=502, text="<html>Bad gateway</html>")

    with pytest.raises(FlightAPIError, match="Expected JSON response"):
        api.get_airlines()


def test_missing_data(api, session):
    session.post.return_value = make_response({})

    with pytest.raises(FlightAPIError, match="no data"):
        api.get_airlines()


def test_connection_errors_propagate(api, session):
    session.post.side_effect = requests.ConnectionError("refused")

    with pytest.raises(requests.ConnectionError):
        api.get_airlines()


def test_book_flight_variables(api, session):
    session.post.return_value = make_response({"data": {"bookFlight": {"id": "b1", "status": "CONFIRMED"}}})

    booking = api.book_flight("1", "user-1", 2, "economy", "2024-06-01")

    assert booking == {"id": "b1", "status": "CONFIRMED"}
    payload = session.post.call_args[1]["json"]
    assert payload["query"] == BOOK_FLIGHT
    assert payload["variables"] == {
        "flightId": "1", "userId": "user-1", "passengers": 2,
        "class": "economy", "departureDate": "2024-06-01",
    }


def test_overlapping_bookings_are_refused(api, session):
    started, release = threading.Event(), threading.Event()

    def slow_post(*args, **kwargs):
        started.set()
        release.wait(timeout=5)
        return make_response({"data": {"bookFlight": {"id": "b1"}}})

    session.post.side_effect = slow_post
    worker = threading.Thread(target=api.book_flight, args=("1", "user-1", 1, "economy", "2024-06-01"))
    worker.start()
    try:
        assert started.wait(timeout=5)
        with pytest.raises(RequestInProgressError):
            api.book_flight("1", "user-1", 1, "economy", "2024-06-01")
    finally:
        release.set()
        worker.join(timeout=5)

    session.post.side_effect = None
    session.post.return_value = make_response({"data": {"bookFlight": {"id": "b2"}}})
    assert api.book_flight("1", "user-1", 1, "economy", "2024-06-01") == {"id": "b2"}


def test_login_returns_auth_result(api, session):
    session.post.return_value = make_response({"data": {"login": {
        "token": "token_abc", "user": {"id": "u1", "name": "Ada", "email": "ada@example.com"},
    }}})

    result = api.login("ada@example.com", "secret1")

    assert result.token == "token_abc"
    assert result.user.account_id == "u1"
