"""GraphQL schema and resolvers for the flight search and booking API."""
import logging
from typing import Any, Dict, List, Optional

from ariadne import MutationType, ObjectType, QueryType, gql, make_executable_schema
from ariadne import format_error as default_format_error
from graphql import GraphQLError

from app.domain.entities.account import AuthResult
from app.domain.entities.booking import Booking
from app.domain.entities.flight import Airline, Flight, FlightDetails
from app.domain.exceptions import FlightBookingError


logger = logging.getLogger(__name__)

type_defs = gql("""
  type Flight {
    id: ID!
    airline: String!
    from: String!
    to: String!
    departure: String!
    arrival: String!
    departureTime: String!
    arrivalTime: String!
    departureDate: String!
    arrivalDate: String!
    duration: String!
    price: Int!
    availableSeats: Int!
    aircraft: Aircraft
  }

  type Aircraft {
    model: String!
    capacity: Int!
  }

  type User {
    id: ID!
    name: String!
    email: String!
  }

  type Booking {
    id: ID!
    bookingNumber: String!
    status: String!
    flight: Flight!
    totalPrice: Int!
    bookingDate: String!
    userId: ID!
    passengers: Int!
    class: String!
    departureDate: String!
  }

  type AuthResponse {
    token: String!
    user: User!
  }

  type Airline {
    id: ID!
    name: String!
    code: String!
    logo: String
  }

  type Query {
    flights(
      from: String
      to: String
      departureDate: String
      dateRange: Int
      airline: String
      minPrice: Int
      maxPrice: Int
      sortBy: String
    ): [Flight]
    flight(id: ID!): Flight
    userBookings(userId: ID!): [Booking]
    airlines: [Airline]
  }

  type Mutation {
    bookFlight(
      flightId: ID!
      userId: ID!
      passengers: Int!
      class: String!
      departureDate: String!
    ): Booking
    cancelBooking(bookingId: ID!): Booking
    login(email: String!, password: String!): AuthResponse
    register(name: String!, email: String!, password: String!): AuthResponse
  }
""")

query = QueryType()
mutation = MutationType()

flight_type = ObjectType("Flight")
for field_name, attr in (
    ("id", "flight_id"),
    ("from", "origin"),
    ("to", "destination"),
    ("departureTime", "departure_time"),
    ("arrivalTime", "arrival_time"),
    ("departureDate", "departure_date"),
    ("arrivalDate", "arrival_date"),
    ("availableSeats", "available_seats"),
):
    flight_type.set_alias(field_name, attr)

booking_type = ObjectType("Booking")
for field_name, attr in (
    ("id", "booking_id"),
    ("bookingNumber", "booking_number"),
    ("totalPrice", "total_price"),
    ("bookingDate", "booking_date_iso"),
    ("userId", "user_id"),
    ("class", "travel_class"),
    ("departureDate", "departure_date"),
):
    booking_type.set_alias(field_name, attr)

user_type = ObjectType("User")
user_type.set_alias("id", "account_id")

airline_type = ObjectType("Airline")
airline_type.set_alias("id", "airline_id")


@booking_type.field("status")
def resolve_booking_status(booking: Booking, _info) -> str:
    return booking.status.value


def _services(info):
    return info.context["container"]


@query.field("flights")
def resolve_flights(_, info, **kwargs) -> List[Flight]:
    return _services(info).get_flight_search_service().search(
        origin=kwargs.get("from"),
        destination=kwargs.get("to"),
        departure_date=kwargs.get("departureDate"),
        date_range=kwargs.get("dateRange"),
        airline=kwargs.get("airline"),
        min_price=kwargs.get("minPrice"),
        max_price=kwargs.get("maxPrice"),
        sort_by=kwargs.get("sortBy"),
    )


@query.field("flight")
def resolve_flight(_, info, id: str) -> Optional[FlightDetails]:
    return _services(info).get_flight_search_service().get_flight(id)


@query.field("userBookings")
def resolve_user_bookings(_, info, userId: str) -> List[Booking]:
    return _services(info).get_booking_service().list_user_bookings(userId)


@query.field("airlines")
def resolve_airlines(_, info) -> List[Airline]:
    return _services(info).get_flight_search_service().list_airlines()


@mutation.field("bookFlight")
def resolve_book_flight(_, info, flightId: str, userId: str, passengers: int, departureDate: str, **kwargs) -> Booking:
    return _services(info).get_booking_service().create_booking(
        flight_id=flightId,
        user_id=userId,
        passengers=passengers,
        travel_class=kwargs["class"],
        departure_date=departureDate,
    )


@mutation.field("cancelBooking")
def resolve_cancel_booking(_, info, bookingId: str) -> Booking:
    return _services(info).get_booking_service().cancel_booking(bookingId)


@mutation.field("login")
def resolve_login(_, info, email: str, password: str) -> AuthResult:
    return _services(info).get_authentication_service().login(email, password)


@mutation.field("register")
def resolve_register(_, info, name: str, email: str, password: str) -> AuthResult:
    return _services(info).get_authentication_service().register(name, email, password)


def format_error(error: GraphQLError, debug: bool = False) -> Dict[str, Any]:
    """
    Format GraphQL errors for the response.

    Domain errors and query/validation errors keep their message.
    Anything else is logged and reported as a generic internal error
    unless debugging.
    """
    original = error.original_error
    if original is None or isinstance(original, FlightBookingError) or debug:
        return default_format_error(error, debug)

    logger.error(f"Unhandled error resolving {error.path}: {original}", exc_info=original)
    formatted = default_format_error(error, False)
    formatted["message"] = "Internal server error"
    return formatted


schema = make_executable_schema(
    type_defs,
    query,
    mutation,
    flight_type,
    booking_type,
    user_type,
    airline_type,
)
