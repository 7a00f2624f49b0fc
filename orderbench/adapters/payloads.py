"""Request payload models shared by the HTTP and CLI adapters."""

from pydantic import BaseModel, Field

from orderbench.core.models import SubmissionRequest


class OperandsRequest(BaseModel):
    """Body of every calculator operation."""

    a: float = Field(description="Left operand")
    b: float = Field(description="Right operand")


class SubmitOrderRequest(BaseModel):
    """Body of an order submission.

    The code is optional here so that a missing code reaches the core
    and is reported the same way as an empty one.
    """

    code: str | None = Field(default=None, description="Order code")

    def to_domain(self) -> SubmissionRequest:
        return SubmissionRequest(code=self.code)
