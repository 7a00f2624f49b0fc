"""Core domain logic for the orderbench service.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import InvalidArgumentError, ValidationFailedError
from .models import Order, StoredOrder, SubmissionRequest

__all__ = [
    "InvalidArgumentError",
    "Order",
    "StoredOrder",
    "SubmissionRequest",
    "ValidationFailedError",
]
