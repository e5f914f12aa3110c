class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    code = "authentication_error"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "forbidden"


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    code = "not_found"


class CapacityExceededError(DomainError):
    """Raised when a session roster is already full."""

    code = "capacity_exceeded"


class InvalidStatusError(DomainError):
    """Raised for an attendance status outside the known values."""

    code = "invalid_status"


class LastAdminError(DomainError):
    """Raised when an operation would remove the final administrator."""

    code = "last_admin_protected"
