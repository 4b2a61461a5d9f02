"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
A rejected operation never applies partially: the cart and the checkout
session are left exactly as they were.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OutOfStockError(ValidationError):
    """The product has no units left to sell."""


class InsufficientStockError(ValidationError):
    """The cart already holds every available unit of the product."""


class EmptyCartError(ValidationError):
    """Payment was requested for a cart with no lines."""


class InsufficientPaymentError(ValidationError):
    """The tendered amount is below the checkout total."""


class SubmissionInProgressError(ValidationError):
    """A transaction for this checkout is already being submitted."""


class SubmissionRejectedError(DomainException):
    """The transaction service refused the transaction.

    The message is the one reported by the service, passed through as-is.
    """


class GatewayError(DomainException):
    """An external collaborator could not be reached or answered badly."""


class AuthenticationRequiredError(GatewayError):
    """The API refused the request for lack of valid credentials."""
