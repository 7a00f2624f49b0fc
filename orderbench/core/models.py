"""Domain models for the orderbench service.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubmissionRequest:
    """A caller-supplied request to submit an order.

    The code may be missing or empty here; OrderSubmissionService is the
    single place that decides whether the request is acceptable.
    """

    code: str | None = None


@dataclass(frozen=True)
class Order:
    """An accepted submission, ready to be handed to the order store."""

    code: str

    def __post_init__(self) -> None:
        """Validate order invariants on creation."""
        if not self.code:
            raise ValueError("code must be a non-empty string")


@dataclass(frozen=True)
class StoredOrder:
    """An order as read back from a persistent store."""

    id: int
    code: str
    saved_at: datetime
