"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncConnection

from credit_ledger.db.models import User as UserModel
from credit_ledger.infrastructure.database.session import Database
from credit_ledger.modules.users.models import User, UserCreateInput, UserStatus

_INSERT_BY_DIALECT: dict[str, Callable[[Any], Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _insert_ignoring_id_conflict(conn: AsyncConnection, values: dict[str, Any]):
    dialect = conn.dialect.name
    try:
        insert = _INSERT_BY_DIALECT[dialect]
    except KeyError:
        raise NotImplementedError(f"Idempotent user insert is not supported on {dialect}") from None
    return insert(UserModel).values(**values).on_conflict_do_nothing(index_elements=[UserModel.id])


class SqlUserRepository:
    """User repository backed by SQLAlchemy models."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def get_by_id(self, user_id: str) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username).limit(1)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return self._to_domain(result.scalars().first())

    async def set_balance(self, user_id: str, balance: int) -> int:
        stmt = update(UserModel).where(UserModel.id == user_id).values(balance=balance)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            return result.rowcount

    async def create_if_missing(self, payload: UserCreateInput) -> None:
        async with self._database.connection() as conn:
            transaction = await conn.begin()
            try:
                stmt = _insert_ignoring_id_conflict(
                    conn,
                    {
                        "id": payload.id,
                        "email": payload.email,
                        "username": payload.username,
                        "balance": payload.balance,
                        "status": UserStatus.ACTIVE.value,
                    },
                )
                await conn.execute(stmt)
                await transaction.commit()
            except Exception:
                await transaction.rollback()
                raise

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            id=str(model.id),
            username=model.username,
            balance=int(model.balance or 0),
            status=UserStatus(model.status or UserStatus.ACTIVE.value),
            email=model.email,
            created_at=model.created_at,
        )
