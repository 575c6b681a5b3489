"""Domain exceptions raised by the catalog, ledger and directory services."""


class FlightBookingError(Exception):
    """Base class for errors reported to API callers verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(FlightBookingError):
    """A flight, booking or account identifier did not resolve."""


class InvalidCredentialsError(FlightBookingError):
    """Login email/password pair did not match any account."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AlreadyExistsError(FlightBookingError):
    """Registration email is already taken."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class ValidationError(FlightBookingError):
    """Input rejected before any state was changed."""
