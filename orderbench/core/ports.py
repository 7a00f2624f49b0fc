"""Port interfaces for the orderbench service.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - OrderStorePort: Persist accepted orders
   - NotificationPort: Send confirmation messages

2. **Driving Ports** (adapters/external systems call into core)
   - OrderSubmissionPort: Entry point for order submission
   - CalculatorPort: Entry point for arithmetic operations
"""

from abc import ABC, abstractmethod

from .models import Order, SubmissionRequest


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class OrderStorePort(ABC):
    """Port for persisting accepted orders.

    The core only ever writes through this port. Querying, updating and
    uniqueness enforcement are not part of the contract.
    """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order.

        Args:
            order: The order to persist. Always carries a validated code.

        Raises:
            Exception: If the underlying storage is unavailable.
        """


class NotificationPort(ABC):
    """Port for sending notification messages.

    Fire-and-forget from the core's perspective; formatting and
    delivery guarantees are the adapter's concern.
    """

    @abstractmethod
    def send(self, message: str) -> None:
        """Send a free-text notification.

        Args:
            message: The message to deliver.

        Raises:
            Exception: If the notification channel is unavailable.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class OrderSubmissionPort(ABC):
    """Port for submitting orders.

    Implementations of this port live in the core (order_service.py).
    The HTTP and CLI adapters call it.
    """

    @abstractmethod
    def handle(self, request: SubmissionRequest | None) -> None:
        """Validate a submission, persist the order and notify.

        Args:
            request: The submission request.

        Raises:
            InvalidArgumentError: If the request or its code is missing.
            ValidationFailedError: If the code is not acceptable.
        """


class CalculatorPort(ABC):
    """Port for the four arithmetic operations."""

    @abstractmethod
    def add(self, a: float, b: float) -> float:
        """Return a + b."""

    @abstractmethod
    def subtract(self, a: float, b: float) -> float:
        """Return a - b."""

    @abstractmethod
    def multiply(self, a: float, b: float) -> float:
        """Return a * b.

        Raises:
            OverflowError: If an operand is the largest finite float.
        """

    @abstractmethod
    def divide(self, a: float, b: float) -> float:
        """Return a / b.

        Raises:
            ZeroDivisionError: If b is zero.
        """
