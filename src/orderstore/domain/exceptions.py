"""Domain-level exceptions.

Every error the store can raise is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """An order item quantity is not a positive integer."""


class InvalidPriceError(ValidationError):
    """A price or monetary amount is negative."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateKeyError(DomainException):
    """An id, email or phone is already taken."""


class CorruptDataError(DomainException):
    """A persisted document is malformed."""


class PersistenceError(DomainException):
    """The backing file could not be read or written."""
