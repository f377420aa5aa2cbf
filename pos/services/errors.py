"""Exceptions raised by the service layer and translated to HTTP errors by the routers."""


class InvalidRequestError(Exception):
    """Raised when a required field is missing or malformed."""
    pass


class NotFoundError(Exception):
    """Raised when no record matches the requested identifier."""
    pass


class PersistenceError(Exception):
    """Raised when the underlying store fails to read or write."""
    pass


class DuplicateKeyError(PersistenceError):
    """Raised when an insert collides with an existing unique key."""
    pass


class PermissionDeniedError(Exception):
    """Raised when an operation is not allowed on the target record."""
    pass


class AuthenticationError(Exception):
    """Raised when login credentials don't match any user."""
    pass
