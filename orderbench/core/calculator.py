"""Arithmetic operations.

Pure calculation with two guards and one artificial delay.
"""

import sys
import time
from collections.abc import Callable

from .ports import CalculatorPort

DEFAULT_SUBTRACT_DELAY_SECONDS = 3.0


class Calculator(CalculatorPort):
    """Stateless implementation of CalculatorPort.

    subtract() waits before returning to stand in for a slow downstream
    call. The wait goes through the injected sleep callable so tests can
    replace it.
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_SUBTRACT_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if delay_seconds < 0:
            raise ValueError(
                f"delay_seconds must be non-negative, got {delay_seconds}"
            )
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        self._sleep(self.delay_seconds)
        return a - b

    def multiply(self, a: float, b: float) -> float:
        # Equality with the float maximum only; not a general overflow check.
        if a == sys.float_info.max or b == sys.float_info.max:
            raise OverflowError("Arithmetic operation resulted in an overflow")
        return a * b

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            raise ZeroDivisionError("Attempted to divide by zero")
        return a / b
