"""Domain models for audit records and record listings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Optional

SortOrder = Literal["asc", "desc"]

SORTABLE_FIELDS: tuple[str, ...] = (
    "created_at",
    "amount",
    "operation_id",
    "user_balance",
    "operation_response",
)


@dataclass(slots=True)
class Record:
    id: str
    operation_id: str
    user_id: str
    amount: int
    user_balance: int
    operation_response: Optional[str]
    created_at: datetime
    deleted: bool = False


@dataclass(slots=True)
class RecordCreateInput:
    operation_id: str
    user_id: str
    amount: int
    user_balance: int
    operation_response: Optional[str]
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class RecordListItem:
    id: str
    user_id: str
    amount: int
    user_balance: int
    operation_id: str
    operation_type: str
    operation_response: Optional[str]
    created_at: datetime
    deleted: bool = False


@dataclass(slots=True)
class RecordQuery:
    """Filters, ordering and window for one page of a user's records.

    ``operation_type`` is matched against the operation's primary key.
    The date range only applies when both ends are given.
    """

    user_id: str
    limit: int = 10
    offset: int = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    operation_type: Optional[str] = None
    sort_by: str = "created_at"
    sort_order: SortOrder = "desc"
    search: Optional[str] = None


@dataclass(slots=True)
class RecordPage:
    records: list[RecordListItem]
    total_count: int


@dataclass(slots=True)
class PageInfo:
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages
