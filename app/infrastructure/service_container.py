"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from threading import RLock
from typing import Optional

from app.application.services.authentication_service import AuthenticationService
from app.application.services.booking_service import BookingService
from app.application.services.flight_search_service import FlightSearchService
from app.config.settings import Config
from app.domain.entities.flight import Aircraft
from app.domain.interfaces.account_repository import IAccountRepository
from app.domain.interfaces.booking_repository import IBookingRepository
from app.domain.interfaces.flight_catalog import IFlightCatalog
from app.domain.interfaces.password_hasher import IPasswordHasher
from app.infrastructure.repositories.account_repository import InMemoryAccountRepository
from app.infrastructure.repositories.booking_repository import InMemoryBookingRepository
from app.infrastructure.repositories.flight_catalog import JsonFlightCatalog
from app.infrastructure.security.password_hasher import WerkzeugPasswordHasher
from app.middleware.monitoring import (
    track_account_registered,
    track_booking_cancelled,
    track_booking_created,
)


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.
    
    One container per application: it owns the catalog, the booking
    ledger and the account directory, so their state lives exactly as
    long as the app. Components are created lazily under a lock, or
    all at once with ``initialize()``.
    """
    
    def __init__(
        self,
        config: type[Config] = Config,
        catalog: Optional[IFlightCatalog] = None,
        booking_repository: Optional[IBookingRepository] = None,
        account_repository: Optional[IAccountRepository] = None,
        password_hasher: Optional[IPasswordHasher] = None,
    ):
        """
        Initialize service container.
        
        Args:
            config: Configuration class
            catalog: Optional pre-built catalog (otherwise loaded from FLIGHTS_DATA_PATH)
            booking_repository: Optional booking storage (otherwise in-memory)
            account_repository: Optional account storage (otherwise in-memory)
            password_hasher: Optional hasher (otherwise Werkzeug)
        """
        self.config = config
        self._catalog = catalog
        self._booking_repository = booking_repository
        self._account_repository = account_repository
        self._password_hasher = password_hasher
        self._flight_search_service: Optional[FlightSearchService] = None
        self._booking_service: Optional[BookingService] = None
        self._authentication_service: Optional[AuthenticationService] = None
        self._lock = RLock()
        self._logger = logging.getLogger(__name__)
    
    def initialize(self) -> None:
        """Create every component eagerly."""
        self.get_flight_search_service()
        self.get_booking_service()
        self.get_authentication_service()
        self._logger.info("All services initialized")
    
    def get_flight_catalog(self) -> IFlightCatalog:
        """Get or load the flight catalog."""
        with self._lock:
            if self._catalog is None:
                try:
                    self._catalog = JsonFlightCatalog.from_file(self.config.FLIGHTS_DATA_PATH)
                except (OSError, ValueError) as e:
                    self._logger.error(f"Failed to load flight catalog: {e}")
                    raise
            return self._catalog
    
    @property
    def catalog_loaded(self) -> bool:
        return self._catalog is not None
    
    def get_booking_repository(self) -> IBookingRepository:
        """Get or create the booking ledger."""
        with self._lock:
            if self._booking_repository is None:
                self._booking_repository = InMemoryBookingRepository()
                self._logger.info("BookingRepository created (in-memory)")
            return self._booking_repository
    
    def get_account_repository(self) -> IAccountRepository:
        """Get or create the account directory."""
        with self._lock:
            if self._account_repository is None:
                self._account_repository = InMemoryAccountRepository()
                self._logger.info("AccountRepository created (in-memory)")
            return self._account_repository
    
    def get_password_hasher(self) -> IPasswordHasher:
        with self._lock:
            if self._password_hasher is None:
                self._password_hasher = WerkzeugPasswordHasher()
            return self._password_hasher
    
    def get_flight_search_service(self) -> FlightSearchService:
        """Get or create flight search service."""
        with self._lock:
            if self._flight_search_service is None:
                self._flight_search_service = FlightSearchService(
                    catalog=self.get_flight_catalog(),
                    default_date_range=self.config.DEFAULT_DATE_RANGE_DAYS,
                    aircraft=Aircraft(
                        model=self.config.AIRCRAFT_MODEL,
                        capacity=self.config.AIRCRAFT_CAPACITY,
                    ),
                )
                self._logger.info("FlightSearchService created")
            return self._flight_search_service
    
    def get_booking_service(self) -> BookingService:
        """Get or create booking service."""
        with self._lock:
            if self._booking_service is None:
                self._booking_service = BookingService(
                    catalog=self.get_flight_catalog(),
                    repository=self.get_booking_repository(),
                    accounts=self.get_account_repository(),
                    enforce_account=self.config.ENFORCE_BOOKING_ACCOUNT,
                    on_created=track_booking_created,
                    on_cancelled=track_booking_cancelled,
                )
                self._logger.info(
                    f"BookingService created (account check {'on' if self.config.ENFORCE_BOOKING_ACCOUNT else 'off'})"
                )
            return self._booking_service
    
    def get_authentication_service(self) -> AuthenticationService:
        """Get or create authentication service."""
        with self._lock:
            if self._authentication_service is None:
                self._authentication_service = AuthenticationService(
                    repository=self.get_account_repository(),
                    password_hasher=self.get_password_hasher(),
                    min_name_length=self.config.MIN_NAME_LENGTH,
                    min_password_length=self.config.MIN_PASSWORD_LENGTH,
                    on_registered=track_account_registered,
                )
                self._logger.info("AuthenticationService created")
            return self._authentication_service
