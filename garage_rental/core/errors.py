# garage_rental/core/errors.py
"""
Error taxonomy shared by the booking core and the API layer.

Every error carries the HTTP status it maps to; main.py turns them into
`{"error": message}` responses.
"""


class BookingError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Malformed or missing input, non-positive months, empty removal reason."""
    status_code = 400


class ConfigurationError(BookingError):
    """Garage lacks a usable monthly price."""
    status_code = 400


class NotFoundError(BookingError):
    status_code = 404


class AuthenticationError(BookingError):
    """No identity (or an invalid one) was supplied."""
    status_code = 401


class AuthorizationError(BookingError):
    """Identity is known but not allowed to perform the action."""
    status_code = 403


class InternalError(BookingError):
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
