"""HTTP API receiver.

Maps decoded JSON payloads onto the driving ports and turns domain
errors into status codes and response bodies. Knows nothing about
sockets; ApiHTTPServer feeds it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from orderbench.adapters.payloads import OperandsRequest, SubmitOrderRequest
from orderbench.core.errors import InvalidArgumentError, ValidationFailedError
from orderbench.core.ports import CalculatorPort, OrderSubmissionPort

logger = logging.getLogger(__name__)

CALCULATOR_OPERATIONS = ("add", "subtract", "multiply", "divide")
ADD_LOCATION = "/api/calculators/add"


@dataclass(frozen=True)
class ApiResponse:
    """Status code, JSON body and extra headers for one request."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)


def error_response(status_code: int, error: str, message: str) -> ApiResponse:
    """Build a uniform error response."""
    return ApiResponse(
        status_code=status_code,
        body={"status": "error", "error": error, "message": message},
    )


class ApiReceiver:
    """Receives API requests and forwards them to the core.

    Known domain errors become 400/422 responses. Anything else
    propagates to the server, which answers with a generic 500.
    """

    def __init__(
        self,
        calculator: CalculatorPort,
        order_submission: OrderSubmissionPort,
    ):
        """Initialize the API receiver.

        Args:
            calculator: CalculatorPort implementation for arithmetic.
            order_submission: OrderSubmissionPort implementation for orders.
        """
        self.calculator = calculator
        self.order_submission = order_submission

    def handle_calculation(self, operation: str, data: Any) -> ApiResponse:
        """Handle one of the calculator endpoints.

        Args:
            operation: One of add, subtract, multiply, divide.
            data: Decoded JSON body.

        Returns:
            201 with a Location header for add, 200 for the others,
            400 for a malformed payload, 422 for a guarded operation.

        Raises:
            ValueError: If operation is not a calculator operation.
        """
        if operation not in CALCULATOR_OPERATIONS:
            raise ValueError(f"Unknown calculator operation: {operation}")

        try:
            request = OperandsRequest.model_validate(data)
        except ValidationError as e:
            return error_response(400, "bad_request", self._describe(e))

        try:
            result = getattr(self.calculator, operation)(request.a, request.b)
        except ZeroDivisionError as e:
            logger.warning(
                f"Rejected {operation}: {e}",
                extra={"a": request.a, "b": request.b},
            )
            return error_response(422, "division_by_zero", str(e))
        except OverflowError as e:
            logger.warning(
                f"Rejected {operation}: {e}",
                extra={"a": request.a, "b": request.b},
            )
            return error_response(422, "overflow", str(e))

        logger.info(
            f"Calculated {operation}",
            extra={"a": request.a, "b": request.b, "result": result},
        )

        if operation == "add":
            return ApiResponse(
                status_code=201,
                body={"result": result},
                headers={"Location": ADD_LOCATION},
            )
        return ApiResponse(status_code=200, body={"result": result})

    def handle_order_submission(self, data: Any) -> ApiResponse:
        """Handle an order submission.

        A JSON `null` body is passed to the core as a missing request.

        Returns:
            200 on success, 400 for a missing or invalid code.
        """
        submission = None
        code = None
        if data is not None:
            try:
                submission = SubmitOrderRequest.model_validate(data).to_domain()
            except ValidationError as e:
                return error_response(400, "bad_request", self._describe(e))
            code = submission.code

        try:
            self.order_submission.handle(submission)
        except InvalidArgumentError as e:
            logger.warning(
                f"Order submission missing {e.param_name}",
                extra={"param_name": e.param_name},
            )
            return error_response(400, "invalid_argument", str(e))
        except ValidationFailedError as e:
            return error_response(400, "validation_failed", str(e))

        logger.info("Order submitted via HTTP", extra={"code": code})
        return ApiResponse(
            status_code=200,
            body={"status": "success", "code": code},
        )

    @staticmethod
    def _describe(error: ValidationError) -> str:
        """Condense a pydantic ValidationError into one line."""
        parts = []
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"]) or "body"
            parts.append(f"{location}: {detail['msg']}")
        return "; ".join(parts)
