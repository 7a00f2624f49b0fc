"""Domain errors raised by the core services.

Arithmetic guards use the builtin ZeroDivisionError and OverflowError.
"""


class InvalidArgumentError(ValueError):
    """A required argument was missing or empty.

    Attributes:
        param_name: Name of the missing argument ("request" or "code").
    """

    def __init__(self, param_name: str, message: str | None = None):
        self.param_name = param_name
        super().__init__(message or f"Value cannot be empty (parameter '{param_name}')")


class ValidationFailedError(ValueError):
    """A required argument was present but semantically invalid."""
