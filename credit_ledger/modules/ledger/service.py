"""Charge a priced operation to a user and append its audit record.

The workflow runs in two phases that are not wrapped in one transaction:
the debit is committed first, then the record is appended. When the append
fails the debit stays in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from credit_ledger.infrastructure.database import Database
from credit_ledger.infrastructure.random_org import RandomStringClient
from credit_ledger.modules.operations import Operation, OperationParams, OperationService
from credit_ledger.modules.records import Record, RecordCreateInput, RecordService
from credit_ledger.modules.users import User, UserService

from .exceptions import InsufficientBalanceError, UnknownOperationError, UnknownUserError
from .models import OperationReceipt

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LedgerService:
    users: UserService
    operations: OperationService
    records: RecordService

    @classmethod
    def from_database(cls, database: Database, random_strings: RandomStringClient) -> "LedgerService":
        return cls(
            users=UserService.from_database(database),
            operations=OperationService.from_database(database, random_strings),
            records=RecordService.from_database(database),
        )

    async def perform_operation(
        self,
        *,
        user_id: str | None,
        operation_type: str | None,
        params: OperationParams,
    ) -> OperationReceipt:
        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise UnknownUserError()

        operation = await self.operations.get_operation_by_type(operation_type)
        if operation is None:
            raise UnknownOperationError()

        if user.balance < operation.cost:
            raise InsufficientBalanceError()

        result = await self.operations.perform_operation(operation.type, params)
        new_balance = await self.debit(user, operation)
        record = await self.append(user, operation, new_balance, result)
        return OperationReceipt(result=result, new_balance=new_balance, record_id=record.id)

    async def debit(self, user: User, operation: Operation) -> int:
        new_balance = user.balance - operation.cost
        await self.users.update_user_balance(user.id, new_balance)
        return new_balance

    async def append(self, user: User, operation: Operation, new_balance: int, result: str) -> Record:
        try:
            return await self.records.create_record(
                RecordCreateInput(
                    operation_id=operation.id,
                    user_id=user.id,
                    amount=operation.cost,
                    user_balance=new_balance,
                    operation_response=result,
                )
            )
        except Exception:
            logger.error(
                "Record append failed after debiting user %s by %s; balance is now %s",
                user.id,
                operation.cost,
                new_balance,
            )
            raise
