class DomainError(Exception):
    """Base class for errors raised by the time tracker services."""


class ValidationError(DomainError):
    """Bad input: empty names, unknown role/status/period, malformed JSON body."""


class AuthenticationError(DomainError):
    """No logged-in user, or credentials did not match."""


class AuthorizationError(DomainError):
    """Logged in, but the role or ownership check failed."""


class PersistenceError(DomainError):
    """Raised by storage adapters when reading or writing fails."""
