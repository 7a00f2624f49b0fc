"""CLI command implementations for orderbench.

Maps CLI commands (add, subtract, multiply, divide, submit) to the driving
ports. Handles CLI-specific result formatting and error reporting.
"""

import logging
from typing import Any

from pydantic import ValidationError

from orderbench.adapters.payloads import OperandsRequest, SubmitOrderRequest
from orderbench.core.errors import InvalidArgumentError, ValidationFailedError
from orderbench.core.ports import CalculatorPort, OrderSubmissionPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to the core ports.

    Every method returns a result dictionary; known errors are reported
    as `{"status": "error", ...}` rather than raised.
    """

    def __init__(
        self,
        calculator: CalculatorPort,
        order_submission: OrderSubmissionPort,
    ):
        """Initialize the CLI command handler.

        Args:
            calculator: CalculatorPort implementation for arithmetic commands.
            order_submission: OrderSubmissionPort implementation for submit.
        """
        self.calculator = calculator
        self.order_submission = order_submission

    def calculate(self, operation: str, args: dict[str, Any]) -> dict[str, Any]:
        """Run one arithmetic operation.

        Args:
            operation: One of add, subtract, multiply, divide.
            args: Dictionary with numeric "a" and "b".

        Returns:
            Dictionary with status and result or message.
        """
        try:
            request = OperandsRequest.model_validate(args)
        except ValidationError as e:
            return {
                "status": "error",
                "operation": operation,
                "message": f"Invalid operands: {e.error_count()} error(s)",
            }

        try:
            result = getattr(self.calculator, operation)(request.a, request.b)
        except (ZeroDivisionError, OverflowError) as e:
            logger.error(f"Failed to {operation}: {e}")
            return {
                "status": "error",
                "operation": operation,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": operation,
            "a": request.a,
            "b": request.b,
            "result": result,
        }

    def submit_order(self, code: str | None, verbose: bool = False) -> dict[str, Any]:
        """Submit an order via CLI.

        Args:
            code: Order code.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message.
        """
        try:
            submission = SubmitOrderRequest.model_validate({"code": code}).to_domain()
        except ValidationError as e:
            return {
                "status": "error",
                "operation": "submit",
                "code": code,
                "message": f"Invalid code: {e.error_count()} error(s)",
            }

        try:
            self.order_submission.handle(submission)
        except (InvalidArgumentError, ValidationFailedError) as e:
            logger.error(f"Failed to submit order: {e}")
            return {
                "status": "error",
                "operation": "submit",
                "code": code,
                "message": str(e),
            }

        if verbose:
            logger.info(
                f"Submitted order {code}", extra={"code": code, "verbose": True}
            )

        return {
            "status": "success",
            "operation": "submit",
            "code": code,
            "message": f"Order {code} submitted",
        }
