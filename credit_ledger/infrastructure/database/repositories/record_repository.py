"""SQLAlchemy implementation for the record store.

Listing builds one ordered list of predicates and shares it between a count
query and a sorted, windowed data query. Every user-supplied value travels as a
bound parameter; the sort column is picked from a fixed mapping instead.
"""

from __future__ import annotations

import asyncio
from datetime import date, datetime, time, timezone
from typing import Any

from sqlalchemy import Select, String, asc, cast, desc, func, or_, select, update
from sqlalchemy.sql.elements import ColumnElement

from credit_ledger.db.models import Operation as OperationModel
from credit_ledger.db.models import Record as RecordModel
from credit_ledger.infrastructure.database.session import Database
from credit_ledger.modules.records.exceptions import InvalidSortFieldError
from credit_ledger.modules.records.models import (
    SORTABLE_FIELDS,
    Record,
    RecordCreateInput,
    RecordListItem,
    RecordPage,
    RecordQuery,
)

SORT_COLUMNS: dict[str, Any] = {field: getattr(RecordModel, field) for field in SORTABLE_FIELDS}

SEARCHABLE_COLUMNS: tuple[Any, ...] = (
    cast(RecordModel.id, String),
    cast(RecordModel.user_id, String),
    cast(RecordModel.amount, String),
    cast(RecordModel.user_balance, String),
    OperationModel.type,
    RecordModel.operation_response,
    cast(RecordModel.created_at, String),
)


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def end_of_day(value: date) -> datetime:
    return datetime.combine(value, time.max, tzinfo=timezone.utc)


def build_record_filters(query: RecordQuery) -> list[ColumnElement[bool]]:
    """Ordered predicates for a user's visible records; the first one is always present."""
    filters: list[ColumnElement[bool]] = [
        RecordModel.user_id == query.user_id,
        RecordModel.deleted.is_(False),
    ]

    if query.operation_type:
        filters.append(OperationModel.id == query.operation_type)

    if query.start_date and query.end_date:
        filters.append(
            RecordModel.created_at.between(start_of_day(query.start_date), end_of_day(query.end_date))
        )

    if query.search:
        pattern = f"%{query.search}%"
        filters.append(or_(*(column.ilike(pattern) for column in SEARCHABLE_COLUMNS)))

    return filters


def _base_from(stmt: Select) -> Select:
    return stmt.select_from(RecordModel).join(OperationModel, RecordModel.operation_id == OperationModel.id)


def build_count_query(filters: list[ColumnElement[bool]]) -> Select:
    return _base_from(select(func.count())).where(*filters)


def build_data_query(filters: list[ColumnElement[bool]], query: RecordQuery) -> Select:
    column = SORT_COLUMNS.get(query.sort_by)
    if column is None:
        raise InvalidSortFieldError(query.sort_by)
    direction = asc if query.sort_order == "asc" else desc

    stmt = select(
        RecordModel.id,
        RecordModel.user_id,
        RecordModel.amount,
        RecordModel.user_balance,
        RecordModel.operation_id,
        OperationModel.type.label("operation_type"),
        RecordModel.operation_response,
        RecordModel.created_at,
        RecordModel.deleted,
    )
    return (
        _base_from(stmt)
        .where(*filters)
        .order_by(direction(column))
        .limit(query.limit)
        .offset(query.offset)
    )


class SqlRecordRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    async def add(self, record_id: str, payload: RecordCreateInput) -> Record:
        model = RecordModel(
            id=record_id,
            user_id=payload.user_id,
            operation_id=payload.operation_id,
            amount=payload.amount,
            user_balance=payload.user_balance,
            operation_response=payload.operation_response,
            created_at=payload.created_at,
            deleted=False,
        )
        async with self._database.session() as session:
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return self._to_domain(model)

    async def mark_deleted(self, record_id: str) -> None:
        stmt = update(RecordModel).where(RecordModel.id == record_id).values(deleted=True)
        async with self._database.session() as session:
            await session.execute(stmt)

    async def list_for_user(self, query: RecordQuery) -> RecordPage:
        filters = build_record_filters(query)
        data_stmt = build_data_query(filters, query)
        count_stmt = build_count_query(filters)

        async with self._database.session() as data_session, self._database.session() as count_session:
            # Both queries settle before their sessions close.
            data_result, count_result = await asyncio.gather(
                data_session.execute(data_stmt),
                count_session.execute(count_stmt),
                return_exceptions=True,
            )
            for outcome in (data_result, count_result):
                if isinstance(outcome, BaseException):
                    raise outcome
            rows = data_result.all()
            total_count = int(count_result.scalar_one())

        records = [
            RecordListItem(
                id=str(row.id),
                user_id=str(row.user_id),
                amount=int(row.amount),
                user_balance=int(row.user_balance),
                operation_id=str(row.operation_id),
                operation_type=row.operation_type,
                operation_response=row.operation_response,
                created_at=row.created_at,
                deleted=bool(row.deleted),
            )
            for row in rows
        ]
        return RecordPage(records=records, total_count=total_count)

    @staticmethod
    def _to_domain(model: RecordModel) -> Record:
        return Record(
            id=str(model.id),
            operation_id=str(model.operation_id),
            user_id=str(model.user_id),
            amount=int(model.amount),
            user_balance=int(model.user_balance),
            operation_response=model.operation_response,
            created_at=model.created_at,
            deleted=bool(model.deleted),
        )
