class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist in the store."""


class StoreError(Exception):
    """Raised when the graph store connection or a query fails.

    The driver exception is always chained as ``__cause__``.
    """
