"""Client-side session: signed-in account, token and search refinement."""
import logging
from typing import Any, Dict, List, Optional

from app.application.services.flight_search_service import refine_flights
from app.domain.entities.account import AuthResult, PublicAccount
from app.domain.entities.flight import Flight
from app.domain.interfaces.session_storage import ISessionStorage
from app.infrastructure.clients.flight_api_client import FlightAPIClient


logger = logging.getLogger(__name__)


class ClientSession:
    """
    Client-side state for an API consumer.
    
    Keeps the signed-in account's public profile and session token in
    storage so they survive restarts. The token is only a convention
    between client and server; nothing verifies it.
    """
    
    def __init__(self, api_client: FlightAPIClient, storage: ISessionStorage):
        """
        Initialize client session.
        
        Args:
            api_client: API client (Dependency Injection)
            storage: Where the profile and token are persisted
        """
        self.api_client = api_client
        self.storage = storage
        self.user: Optional[PublicAccount] = None
        self.token: Optional[str] = None
        self._logger = logging.getLogger(__name__)
    
    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
    
    def restore(self) -> Optional[PublicAccount]:
        """
        Load the stored profile and token.
        
        If either is missing, or the stored data does not parse, both
        are cleared.
        
        Returns:
            The restored account, or None
        """
        try:
            data = self.storage.load()
        except ValueError as e:
            self._logger.error(f"Error parsing stored session: {e}")
            self._forget()
            return None
        
        if not data:
            return None
        
        token = data.get("token")
        try:
            user = PublicAccount.from_dict(data["user"]) if data.get("user") else None
        except (KeyError, TypeError) as e:
            self._logger.error(f"Error parsing stored user data: {e}")
            user = None
        
        if user is None or not token:
            self._forget()
            return None
        
        self.user, self.token = user, token
        self._logger.info(f"Restored session for {user.email}")
        return user
    
    def login(self, email: str, password: str) -> PublicAccount:
        return self._remember(self.api_client.login(email, password))
    
    def register(self, name: str, email: str, password: str) -> PublicAccount:
        return self._remember(self.api_client.register(name, email, password))
    
    def logout(self) -> None:
        """Forget the profile and token."""
        self._forget()
        self._logger.info("Logged out")
    
    def search(
        self,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        departure_date: Optional[str] = None,
        date_range: Optional[int] = None,
        airline: Optional[str] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        sort_by: Optional[str] = "price",
    ) -> List[Flight]:
        """
        Search on the server, then filter and sort the results locally.
        
        Sorting defaults to price ascending, like the search results view.
        """
        flights = self.api_client.search_flights(origin, destination, departure_date, date_range)
        return refine_flights(flights, airline=airline, min_price=min_price, max_price=max_price, sort_by=sort_by)
    
    def book(self, flight_id: str, passengers: int, travel_class: str, departure_date: str) -> Dict[str, Any]:
        """
        Book a flight for the signed-in account.
        
        Raises:
            PermissionError: If nobody is signed in
        """
        user = self._require_user()
        return self.api_client.book_flight(flight_id, user.account_id, passengers, travel_class, departure_date)
    
    def bookings(self) -> List[Dict[str, Any]]:
        return self.api_client.get_user_bookings(self._require_user().account_id)
    
    def _require_user(self) -> PublicAccount:
        if self.user is None:
            raise PermissionError("Please log in first")
        return self.user
    
    def _remember(self, result: AuthResult) -> PublicAccount:
        self.user, self.token = result.user, result.token
        self.storage.save({"user": result.user.to_dict(), "token": result.token})
        self._logger.info(f"Signed in as {result.user.email}")
        return result.user
    
    def _forget(self) -> None:
        self.user, self.token = None, None
        self.storage.clear()
