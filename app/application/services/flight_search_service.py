"""Flight search, refinement and lookup over the catalog."""
import logging
from datetime import date, time
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from app.domain.entities.flight import Aircraft, Airline, Flight, FlightDetails
from app.domain.exceptions import ValidationError
from app.domain.interfaces.flight_catalog import IFlightCatalog
from app.utils.flight_utils import (
    days_between,
    is_blank,
    normalize_city,
    parse_calendar_date,
    parse_duration_minutes,
    parse_time_of_day,
)


logger = logging.getLogger(__name__)

DEFAULT_DATE_RANGE_DAYS = 7


class SortKey(str, Enum):
    """Sort options offered for search results."""

    PRICE = "price"
    PRICE_DESC = "price-desc"
    DURATION = "duration"
    DURATION_DESC = "duration-desc"
    DEPARTURE = "departure"
    DEPARTURE_DESC = "departure-desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortKey"]:
        """
        Convert a sort option string.

        Raises:
            ValidationError: If the option is not one of the known keys
        """
        if is_blank(value):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            allowed = ", ".join(key.value for key in cls)
            raise ValidationError(f"Unknown sort option '{value}' (expected one of: {allowed})")


def _departure_key(flight: Flight) -> Optional[Tuple[date, time]]:
    departure_date = flight.parsed_departure_date
    if departure_date is None:
        return None
    return departure_date, parse_time_of_day(flight.departure_time) or time.max


_SORTS: dict = {
    SortKey.PRICE: (lambda f: f.price, False),
    SortKey.PRICE_DESC: (lambda f: f.price, True),
    SortKey.DURATION: (lambda f: parse_duration_minutes(f.duration), False),
    SortKey.DURATION_DESC: (lambda f: parse_duration_minutes(f.duration), True),
    SortKey.DEPARTURE: (_departure_key, False),
    SortKey.DEPARTURE_DESC: (_departure_key, True),
}


def _stable_sort(flights: List[Flight], key, reverse: bool) -> List[Flight]:
    """Sort by key; flights whose key is None keep their order at the end."""
    keyed = [f for f in flights if key(f) is not None]
    unkeyed = [f for f in flights if key(f) is None]
    return sorted(keyed, key=key, reverse=reverse) + unkeyed


def search_flights(
    flights: Iterable[Flight],
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    target_date: Optional[str] = None,
    tolerance_days: int = DEFAULT_DATE_RANGE_DAYS,
) -> List[Flight]:
    """
    Filter flights by route and date window, keeping catalog order.

    Args:
        flights: Flights to search
        origin: Case-insensitive substring of the origin city; blank means any
        destination: Case-insensitive substring of the destination city; blank means any
        target_date: Requested departure date; blank or unparseable means any
        tolerance_days: Days either side of ``target_date`` still matched (inclusive)

    Returns:
        Matching flights in input order
    """
    results = list(flights)

    if not is_blank(origin):
        needle = normalize_city(origin)
        results = [f for f in results if needle in f.origin.lower()]

    if not is_blank(destination):
        needle = normalize_city(destination)
        results = [f for f in results if needle in f.destination.lower()]

    requested = parse_calendar_date(target_date)
    if requested is not None:
        results = [
            f for f in results
            if f.parsed_departure_date is not None
            and days_between(f.parsed_departure_date, requested) <= tolerance_days
        ]
    elif not is_blank(target_date):
        logger.info(f"Ignoring unparseable departure date {target_date!r}")

    return results


def refine_flights(
    flights: Iterable[Flight],
    airline: Optional[str] = None,
    min_price: Optional[int] = None,
    max_price: Optional[int] = None,
    sort_by: Optional[str] = None,
) -> List[Flight]:
    """
    Apply airline/price filters and an optional sort to search results.

    Sorting is stable: flights with equal keys keep their relative order.

    Args:
        flights: Already searched flights
        airline: Exact airline name to keep; blank means any
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        sort_by: One of the ``SortKey`` values; blank keeps input order

    Returns:
        Refined flights

    Raises:
        ValidationError: If ``sort_by`` is unknown
    """
    sort_key = SortKey.parse(sort_by)
    results = list(flights)

    if not is_blank(airline):
        results = [f for f in results if f.airline == airline]
    if min_price is not None:
        results = [f for f in results if f.price >= min_price]
    if max_price is not None:
        results = [f for f in results if f.price <= max_price]

    if sort_key is not None:
        key, reverse = _SORTS[sort_key]
        results = _stable_sort(results, key, reverse)

    return results


def derive_airlines(flights: Iterable[Flight]) -> List[Airline]:
    """Unique airline names in first-seen order, with derived codes."""
    names: List[str] = []
    for flight in flights:
        if flight.airline not in names:
            names.append(flight.airline)
    return [Airline.from_name(index, name) for index, name in enumerate(names)]


class FlightSearchService:
    """
    Read-side service over the flight catalog.

    Combines route/date search, result refinement, single-flight
    lookup and the derived airline list.
    """

    def __init__(
        self,
        catalog: IFlightCatalog,
        default_date_range: int = DEFAULT_DATE_RANGE_DAYS,
        aircraft: Optional[Aircraft] = None,
    ):
        """
        Initialize flight search service.

        Args:
            catalog: Flight catalog (Dependency Injection)
            default_date_range: Tolerance used when a search gives none
            aircraft: Descriptor attached to single-flight lookups
        """
        self.catalog = catalog
        self.default_date_range = default_date_range
        self.aircraft = aircraft or Aircraft(model="Boeing 787", capacity=300)
        self._logger = logging.getLogger(__name__)

    def search(
        self,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        departure_date: Optional[str] = None,
        date_range: Optional[int] = None,
        airline: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> List[Flight]:
        """
        Search the catalog and optionally refine the results.

        Without refinement arguments the result is in catalog order.

        Raises:
            ValidationError: If ``date_range`` is negative or ``sort_by`` unknown
        """
        tolerance = self.default_date_range if date_range is None else date_range
        if tolerance < 0:
            raise ValidationError("dateRange must not be negative")

        results = search_flights(
            self.catalog.all(),
            origin=origin,
            destination=destination,
            target_date=departure_date,
            tolerance_days=tolerance,
        )
        results = refine_flights(
            results,
            airline=airline,
            min_price=min_price,
            max_price=max_price,
            sort_by=sort_by,
        )

        self._logger.info(
            f"Flight search from={origin!r} to={destination!r} date={departure_date!r} "
            f"range={tolerance} -> {len(results)} result(s)"
        )
        return results

    def get_flight(self, flight_id: str) -> Optional[FlightDetails]:
        """
        Look up one flight with its aircraft descriptor.

        Args:
            flight_id: Flight identifier

        Returns:
            Flight details, or None if the flight does not exist
        """
        flight = self.catalog.get(flight_id)
        if flight is None:
            self._logger.info(f"Flight {flight_id} not found")
            return None
        return FlightDetails(flight=flight, aircraft=self.aircraft)

    def list_airlines(self) -> List[Airline]:
        return derive_airlines(self.catalog.all())
