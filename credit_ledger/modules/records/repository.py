"""Repository protocol for audit records."""

from __future__ import annotations

from typing import Protocol

from .models import Record, RecordCreateInput, RecordPage, RecordQuery


class RecordRepository(Protocol):
    async def add(self, record_id: str, payload: RecordCreateInput) -> Record:
        ...

    async def mark_deleted(self, record_id: str) -> None:
        ...

    async def list_for_user(self, query: RecordQuery) -> RecordPage:
        ...
