"""Authentication service: account registration and login."""
import logging
import uuid
from typing import Callable, Optional

from app.domain.entities.account import Account, AuthResult
from app.domain.exceptions import AlreadyExistsError, InvalidCredentialsError, ValidationError
from app.domain.interfaces.account_repository import IAccountRepository
from app.domain.interfaces.password_hasher import IPasswordHasher
from app.utils.account_validator import AccountValidator


logger = logging.getLogger(__name__)


def generate_session_token() -> str:
    """Opaque bearer token; the server keeps no record of it."""
    return f"token_{uuid.uuid4()}"


class AuthenticationService:
    """
    Service for registering accounts and logging in.
    
    Orchestrates the account flow:
    1. Validate registration input
    2. Hash the password and store the account (email must be new)
    3. Issue an opaque session token
    
    Tokens are not persisted or verified on later requests.
    """
    
    def __init__(
        self,
        repository: IAccountRepository,
        password_hasher: IPasswordHasher,
        min_name_length: int = 2,
        min_password_length: int = 6,
        token_factory: Callable[[], str] = generate_session_token,
        on_registered: Optional[Callable[[Account], None]] = None,
    ):
        """
        Initialize authentication service.
        
        Args:
            repository: Account directory (Dependency Injection)
            password_hasher: Credential hashing strategy (Dependency Injection)
            min_name_length: Minimum non-blank name length
            min_password_length: Minimum password length
            token_factory: Produces session tokens
            on_registered: Optional hook called after an account is stored
        """
        self.repository = repository
        self.password_hasher = password_hasher
        self.min_name_length = min_name_length
        self.min_password_length = min_password_length
        self._token_factory = token_factory
        self._on_registered = on_registered
        self._logger = logging.getLogger(__name__)
    
    def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Register a new account.
        
        Args:
            name: Display name
            email: Email, unique as given (no case folding)
            password: Plain-text password, stored only as a salted hash
            
        Returns:
            Token and public account view
            
        Raises:
            ValidationError: If a field fails validation
            AlreadyExistsError: If the email is already registered
        """
        errors = AccountValidator.registration_errors(
            name,
            email,
            password,
            min_name_length=self.min_name_length,
            min_password_length=self.min_password_length,
        )
        if errors:
            self._logger.warning(f"Registration rejected: invalid {', '.join(sorted(errors))}")
            raise ValidationError("; ".join(errors[field] for field in sorted(errors)))
        
        # add_if_absent re-checks under the directory lock
        if self.repository.get_by_email(email) is not None:
            self._logger.warning("Registration rejected: email already registered")
            raise AlreadyExistsError()
        
        account = Account(
            account_id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=self.password_hasher.hash(password),
        )
        if not self.repository.add_if_absent(account):
            self._logger.warning("Registration rejected: email already registered")
            raise AlreadyExistsError()
        
        self._logger.info(f"Account {account.account_id} registered")
        if self._on_registered:
            self._on_registered(account)
        return AuthResult(token=self._token_factory(), user=account.public_view())
    
    def login(self, email: str, password: str) -> AuthResult:
        """
        Log in with email and password.
        
        Args:
            email: Email exactly as registered
            password: Plain-text password
            
        Returns:
            Fresh token and public account view
            
        Raises:
            InvalidCredentialsError: If no account matches both fields
        """
        account = self.repository.get_by_email(email)
        if account is None or not self.password_hasher.verify(account.password_hash, password):
            self._logger.warning("Login rejected: invalid credentials")
            raise InvalidCredentialsError()
        
        self._logger.info(f"Account {account.account_id} logged in")
        return AuthResult(token=self._token_factory(), user=account.public_view())
