"""Domain models for the operation catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class OperationType(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    SQUARE_ROOT = "square_root"
    RANDOM_STRING = "random_string"
    CREATE_USER = "create_user"


# Catalog written by the schema bootstrap when it creates the operations table.
DEFAULT_OPERATION_COSTS: dict[OperationType, int] = {
    OperationType.ADDITION: 1,
    OperationType.SUBTRACTION: 1,
    OperationType.MULTIPLICATION: 2,
    OperationType.DIVISION: 2,
    OperationType.SQUARE_ROOT: 3,
    OperationType.RANDOM_STRING: 5,
    OperationType.CREATE_USER: 0,
}


@dataclass(slots=True)
class Operation:
    id: str
    type: str
    cost: int


@dataclass(slots=True)
class OperationParams:
    num1: Number = 0
    num2: Number = 0
