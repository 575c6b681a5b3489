"""GraphQL client for the flight search and booking API."""
import logging
from threading import Lock
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from app.config.settings import Config
from app.domain.entities.account import AuthResult, PublicAccount
from app.domain.entities.flight import Aircraft, Airline, Flight, FlightDetails


logger = logging.getLogger(__name__)

FLIGHT_FIELDS = """
  id airline from to departure arrival departureTime arrivalTime
  departureDate arrivalDate duration price availableSeats
"""

BOOKING_FIELDS = f"""
  id bookingNumber status totalPrice bookingDate userId passengers class departureDate
  flight {{ {FLIGHT_FIELDS} }}
"""

SEARCH_FLIGHTS = f"""
query GetFlights($from: String, $to: String, $departureDate: String, $dateRange: Int) {{
  flights(from: $from, to: $to, departureDate: $departureDate, dateRange: $dateRange) {{ {FLIGHT_FIELDS} }}
}}
"""

GET_FLIGHT = f"""
query GetFlight($id: ID!) {{
  flight(id: $id) {{ {FLIGHT_FIELDS} aircraft {{ model capacity }} }}
}}
"""

GET_AIRLINES = """
query GetAirlines {
  airlines { id name code logo }
}
"""

GET_USER_BOOKINGS = f"""
query GetUserBookings($userId: ID!) {{
  userBookings(userId: $userId) {{ {BOOKING_FIELDS} }}
}}
"""

BOOK_FLIGHT = f"""
mutation BookFlight($flightId: ID!, $userId: ID!, $passengers: Int!, $class: String!, $departureDate: String!) {{
  bookFlight(flightId: $flightId, userId: $userId, passengers: $passengers, class: $class, departureDate: $departureDate) {{
    {BOOKING_FIELDS}
  }}
}}
"""

CANCEL_BOOKING = f"""
mutation CancelBooking($bookingId: ID!) {{
  cancelBooking(bookingId: $bookingId) {{ {BOOKING_FIELDS} }}
}}
"""

LOGIN_USER = """
mutation LoginUser($email: String!, $password: String!) {
  login(email: $email, password: $password) { token user { id name email } }
}
"""

REGISTER_USER = """
mutation RegisterUser($name: String!, $email: String!, $password: String!) {
  register(name: $name, email: $email, password: $password) { token user { id name email } }
}
"""


class FlightAPIError(Exception):
    """The API answered with GraphQL errors or an unusable response."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class RequestInProgressError(Exception):
    """A booking submission is already outstanding on this client."""


class FlightAPIClient:
    """
    Client for the flight search and booking GraphQL API.
    
    One request per call; booking submissions are not allowed to overlap.
    """
    
    def __init__(self, api_url: Optional[str] = None, timeout: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the API client.
        
        Args:
            api_url: GraphQL endpoint URL (defaults to Config value)
            timeout: Request timeout in seconds (defaults to Config value)
            session: Optional pre-configured requests session
        """
        self.api_url = api_url or Config.API_URL
        self.timeout = timeout or Config.API_TIMEOUT
        self._logger = logging.getLogger(__name__)
        self._booking_lock = Lock()
        
        if session is None:
            # Connection failures are retried; POST bodies are never re-sent
            session = requests.Session()
            retry_strategy = Retry(
                total=3,
                backoff_factor=1,
                status_forcelist=[429, 502, 503, 504],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
    
    def execute(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send a GraphQL document and return its ``data``.
        
        Args:
            document: Query or mutation text
            variables: Optional variables
            
        Returns:
            The ``data`` object of the response
            
        Raises:
            FlightAPIError: If the response carries errors or is not JSON
            requests.RequestException: If the request itself fails
        """
        payload = {"query": document, "variables": variables or {}}
        try:
            response = self.session.post(
                self.api_url,
                json=payload,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            self._logger.error(f"API request failed: POST {self.api_url} - {e}")
            raise
        
        try:
            body = response.json()
        except ValueError as json_error:
            self._logger.error(f"Non-JSON response from {self.api_url} (status {response.status_code})")
            raise FlightAPIError(
                f"Expected JSON response but got: {response.text[:200]}"
            ) from json_error
        
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            message = errors[0].get("message", "Unknown error")
            self._logger.warning(f"API returned error: {message}")
            raise FlightAPIError(message, errors)
        
        if response.status_code >= 400:
            response.raise_for_status()
        
        data = body.get("data") if isinstance(body, dict) else None
        if data is None:
            raise FlightAPIError("Response contained no data")
        return data
    
    def search_flights(self, origin: Optional[str] = None, destination: Optional[str] = None,
                       departure_date: Optional[str] = None, date_range: Optional[int] = None) -> List[Flight]:
        """Search flights by route and date window."""
        variables = {
            "from": origin,
            "to": destination,
            "departureDate": departure_date,
            "dateRange": date_range,
        }
        data = self.execute(SEARCH_FLIGHTS, {k: v for k, v in variables.items() if v is not None})
        return [Flight.from_dict(record) for record in data["flights"] or []]
    
    def get_flight(self, flight_id: str) -> Optional[FlightDetails]:
        """Fetch one flight with its aircraft descriptor."""
        record = self.execute(GET_FLIGHT, {"id": flight_id})["flight"]
        if record is None:
            return None
        aircraft = record.get("aircraft") or {}
        return FlightDetails(
            flight=Flight.from_dict(record),
            aircraft=Aircraft(model=aircraft.get("model", ""), capacity=aircraft.get("capacity", 0)),
        )
    
    def get_airlines(self) -> List[Airline]:
        data = self.execute(GET_AIRLINES)
        return [
            Airline(airline_id=a["id"], name=a["name"], code=a["code"], logo=a.get("logo"))
            for a in data["airlines"] or []
        ]
    
    def get_user_bookings(self, user_id: str) -> List[Dict[str, Any]]:
        """List a user's bookings as returned by the API."""
        return self.execute(GET_USER_BOOKINGS, {"userId": user_id})["userBookings"] or []
    
    def book_flight(self, flight_id: str, user_id: str, passengers: int,
                    travel_class: str, departure_date: str) -> Dict[str, Any]:
        """
        Book a flight.
        
        Raises:
            RequestInProgressError: If another booking from this client is still pending
            FlightAPIError: If the API rejects the booking
        """
        if not self._booking_lock.acquire(blocking=False):
            raise RequestInProgressError("A booking request is already in progress")
        try:
            self._logger.info(f"Booking flight {flight_id} for {passengers} passenger(s)")
            data = self.execute(BOOK_FLIGHT, {
                "flightId": flight_id,
                "userId": user_id,
                "passengers": passengers,
                "class": travel_class,
                "departureDate": departure_date,
            })
            return data["bookFlight"]
        finally:
            self._booking_lock.release()
    
    def cancel_booking(self, booking_id: str) -> Dict[str, Any]:
        return self.execute(CANCEL_BOOKING, {"bookingId": booking_id})["cancelBooking"]
    
    def login(self, email: str, password: str) -> AuthResult:
        return self._auth_result(self.execute(LOGIN_USER, {"email": email, "password": password})["login"])
    
    def register(self, name: str, email: str, password: str) -> AuthResult:
        data = self.execute(REGISTER_USER, {"name": name, "email": email, "password": password})
        return self._auth_result(data["register"])
    
    @staticmethod
    def _auth_result(data: Dict[str, Any]) -> AuthResult:
        return AuthResult(token=data["token"], user=PublicAccount.from_dict(data["user"]))
