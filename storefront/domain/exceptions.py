"""Domain-level exceptions.

Everything the data layer and the services raise on purpose derives from
StorefrontError, so callers can catch the whole family in one place.
"""


class StorefrontError(Exception):
    """Base class for all storefront errors."""


class ValidationError(StorefrontError, ValueError):
    """A field value breaks a business rule."""


class ImmutableFieldError(ValidationError):
    """A field that is fixed after creation was changed."""


class LedgerViolationError(ImmutableFieldError):
    """A price history entry was modified or removed on its own."""


class EntityNotFoundError(StorefrontError, LookupError):
    """A requested entity does not exist."""


class ConstraintViolationError(StorefrontError):
    """The database rejected a write because of a constraint."""


class DuplicateEmailError(ConstraintViolationError):
    """A customer with this email is already registered."""


class DuplicateOrderReferenceError(ConstraintViolationError):
    """An order with this reference already exists."""


class ProductInUseError(ConstraintViolationError):
    """The product is still referenced by cart or order items."""
