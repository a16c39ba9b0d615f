"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every failure rejects the triggering operation; none is retried internally.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnauthorizedError(DomainException):
    """The caller does not hold the role the operation requires."""


class AlreadyInitializedError(DomainException):
    """The registry owner has already been set."""


class InvalidProductError(ValidationError):
    """A product field failed validation at creation time."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid product {field}: {message}")
        self.field = field


class InvalidArgumentError(ValidationError):
    """A parameter is malformed (blank principal, bad selector, out of range)."""


class InvalidTransitionError(ValidationError):
    """A supply-chain location move would go backwards."""


class DuplicateIdError(ValidationError):
    """A product with the same identifier already exists."""


class ExpiredOrInvalidError(ValidationError):
    """A price was requested for an expiry that is not in the future."""


class LengthMismatchError(ValidationError):
    """Parallel input sequences do not match the number of products."""


class NotFoundError(EntityNotFoundError):
    """The targeted product identifier does not exist."""


class NoProductsError(DomainException):
    """An aggregate was requested over an empty registry."""


class NoValidProductsError(NoProductsError):
    """Every product in the registry is expired."""
