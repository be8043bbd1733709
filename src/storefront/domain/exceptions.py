"""Domain-level exceptions.

The cart and catalog engines never raise for UI-originated input; they
clamp, ignore or fall back to a default instead.  These exceptions are
raised by the surrounding use cases (unknown product, out of stock, not
logged in) so the CLI can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationRequiredError(DomainException):
    """The operation needs a logged-in user."""


class PermissionDeniedError(DomainException):
    """The current user is not allowed to perform the operation."""
