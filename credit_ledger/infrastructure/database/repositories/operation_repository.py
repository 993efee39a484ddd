"""SQLAlchemy implementation for the operation catalog"""

from __future__ import annotations

from sqlalchemy import select

from credit_ledger.db.models import Operation as OperationModel
from credit_ledger.infrastructure.database.session import Database
from credit_ledger.modules.operations.models import Operation


class SqlOperationRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    async def get_by_type(self, operation_type: str) -> Operation | None:
        stmt = select(OperationModel).where(OperationModel.type == operation_type).limit(1)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            model = result.scalars().first()
        if model is None:
            return None
        return Operation(id=str(model.id), type=model.type, cost=int(model.cost))
