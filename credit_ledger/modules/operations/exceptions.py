"""Operation domain specific exceptions."""


class OperationError(Exception):
    """Base class for operation domain errors."""


class InvalidOperationTypeError(OperationError):
    """Raised when the executor has no implementation for an operation type."""

    def __init__(self, message: str = "Invalid operation type") -> None:
        super().__init__(message)


class InvalidOperandError(OperationError):
    """Raised when the operands make the operation undefined."""


class DivisionByZeroError(InvalidOperandError):
    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


class RandomStringGenerationError(OperationError):
    """Raised for any failure of the random string provider."""

    def __init__(self, message: str = "Failed to generate random string") -> None:
        super().__init__(message)
