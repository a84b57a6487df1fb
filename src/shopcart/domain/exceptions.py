"""Domain-level exceptions.

All invalid input to a constructor or mutator is expressed as a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NullProductError(ValidationError):
    """A product was required but none was given."""

    def __init__(self, message: str = "Product must not be null") -> None:
        super().__init__(message)


class InvalidProductError(ValidationError):
    """A product could not be built from the given code/description."""

    def __init__(self, message: str = "Product code and description are required") -> None:
        super().__init__(message)


class InvalidUnitPriceError(ValidationError):
    """Unit price is missing, unparsable or negative."""

    def __init__(self, message: str = "Unit price must not be null or negative") -> None:
        super().__init__(message)


class InvalidQuantityError(ValidationError):
    """Quantity is not a non-negative integer."""

    def __init__(self, message: str = "Quantity must not be less than zero") -> None:
        super().__init__(message)
