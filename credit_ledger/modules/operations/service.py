"""Operation catalog lookups and the arithmetic/random-string executor."""

from __future__ import annotations

import logging
import math
from typing import Callable

import httpx
from sqlalchemy.exc import SQLAlchemyError

from credit_ledger.infrastructure.database import Database
from credit_ledger.infrastructure.random_org import RandomStringClient

from .exceptions import (
    DivisionByZeroError,
    InvalidOperandError,
    InvalidOperationTypeError,
    RandomStringGenerationError,
)
from .models import Number, Operation, OperationParams, OperationType
from .repository import OperationRepository

logger = logging.getLogger(__name__)

# Integral floats below this magnitude print without an exponent.
_PLAIN_INTEGER_LIMIT = 1e21


def format_number(value: Number) -> str:
    """Render a numeric result the way the API reports it ("3", "3.5", "NaN")."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def _square_root(value: Number) -> float:
    if value < 0:
        raise InvalidOperandError("Square root of a negative number")
    return math.sqrt(value)


def _divide(num1: Number, num2: Number) -> float:
    if num2 == 0:
        raise DivisionByZeroError()
    return num1 / num2


_ARITHMETIC: dict[str, Callable[[Number, Number], Number]] = {
    OperationType.ADDITION.value: lambda a, b: a + b,
    OperationType.SUBTRACTION.value: lambda a, b: a - b,
    OperationType.MULTIPLICATION.value: lambda a, b: a * b,
    OperationType.DIVISION.value: _divide,
    OperationType.SQUARE_ROOT.value: lambda a, _b: _square_root(a),
}


class OperationService:
    def __init__(
        self,
        repository: OperationRepository,
        random_strings: RandomStringClient,
    ) -> None:
        self._repository = repository
        self._random_strings = random_strings

    @classmethod
    def from_database(cls, database: Database, random_strings: RandomStringClient) -> "OperationService":
        # Deferred: the SQL repositories import this package for the domain models.
        from credit_ledger.infrastructure.database.repositories.operation_repository import SqlOperationRepository

        return cls(SqlOperationRepository(database), random_strings)

    async def get_operation_by_type(self, operation_type: str | None) -> Operation | None:
        if not operation_type:
            return None
        try:
            return await self._repository.get_by_type(operation_type)
        except SQLAlchemyError:
            logger.exception("Error querying operation %s", operation_type)
            raise

    async def perform_operation(self, operation_type: str, params: OperationParams) -> str:
        logger.info("Performing operation %s with %s", operation_type, params)

        if operation_type == OperationType.RANDOM_STRING.value:
            return await self.get_random_string()

        compute = _ARITHMETIC.get(operation_type)
        if compute is None:
            raise InvalidOperationTypeError()
        return format_number(compute(params.num1, params.num2))

    async def get_random_string(self) -> str:
        try:
            return await self._random_strings.generate()
        except httpx.HTTPError as exc:
            logger.exception("Error generating random string")
            raise RandomStringGenerationError() from exc
