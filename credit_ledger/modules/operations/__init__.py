"""Operation catalog and executor exports"""

from .exceptions import (
    DivisionByZeroError,
    InvalidOperandError,
    InvalidOperationTypeError,
    OperationError,
    RandomStringGenerationError,
)
from .models import DEFAULT_OPERATION_COSTS, Operation, OperationParams, OperationType
from .service import OperationService, format_number

__all__ = [
    "DEFAULT_OPERATION_COSTS",
    "DivisionByZeroError",
    "InvalidOperandError",
    "InvalidOperationTypeError",
    "Operation",
    "OperationError",
    "OperationParams",
    "OperationService",
    "OperationType",
    "RandomStringGenerationError",
    "format_number",
]
