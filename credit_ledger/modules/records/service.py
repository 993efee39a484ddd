"""Domain service for the append-only record store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from credit_ledger.db.models import generate_uuid
from credit_ledger.infrastructure.database import Database

from .models import Record, RecordCreateInput, RecordPage, RecordQuery
from .repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordService:
    repository: RecordRepository

    @classmethod
    def from_database(cls, database: Database) -> "RecordService":
        # Deferred: the SQL repositories import this package for the domain models.
        from credit_ledger.infrastructure.database.repositories.record_repository import SqlRecordRepository

        return cls(SqlRecordRepository(database))

    async def create_record(self, payload: RecordCreateInput) -> Record:
        if payload.created_at is None:
            payload = replace(payload, created_at=datetime.now(timezone.utc))
        record_id = generate_uuid()
        logger.info("Creating record %s for user %s", record_id, payload.user_id)
        try:
            return await self.repository.add(record_id, payload)
        except SQLAlchemyError:
            logger.exception("Error creating record for user %s", payload.user_id)
            raise

    async def soft_delete_record(self, record_id: str) -> None:
        logger.info("Soft deleting record %s", record_id)
        try:
            await self.repository.mark_deleted(record_id)
        except SQLAlchemyError:
            logger.exception("Error soft deleting record %s", record_id)
            raise

    async def get_user_records(self, query: RecordQuery) -> RecordPage:
        logger.info("Fetching user records %s", query)
        try:
            return await self.repository.list_for_user(query)
        except SQLAlchemyError:
            logger.exception("Error fetching records of user %s", query.user_id)
            raise
