"""
Domain error taxonomy.

Callers translate these into transport responses:
- InvalidArgumentError / ValidationError -> 400
- OrderNotFoundError -> 404
- RepositoryError -> 500
"""
from typing import Optional


class NorthwindError(Exception):
    """Base class for all errors raised by the order persistence core."""


class InvalidArgumentError(NorthwindError, ValueError):
    """Caller-supplied argument violates a precondition (no store access)."""


class ValidationError(NorthwindError, ValueError):
    """Aggregate data failed validation before any write."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class OrderNotFoundError(NorthwindError, LookupError):
    """No order exists with the requested identity."""

    def __init__(self, order_id: Optional[int]):
        super().__init__(f"Order with ID {order_id} not found.")
        self.order_id = order_id


class RepositoryError(NorthwindError):
    """
    Underlying store failed during a write.

    The original store exception is kept on ``cause`` (and ``__cause__``)
    so operators can diagnose the root failure.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
