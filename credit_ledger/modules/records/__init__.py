"""Record store domain exports"""

from .exceptions import InvalidSortFieldError, RecordError
from .models import (
    SORTABLE_FIELDS,
    PageInfo,
    Record,
    RecordCreateInput,
    RecordListItem,
    RecordPage,
    RecordQuery,
    SortOrder,
)
from .service import RecordService

__all__ = [
    "InvalidSortFieldError",
    "PageInfo",
    "Record",
    "RecordCreateInput",
    "RecordError",
    "RecordListItem",
    "RecordPage",
    "RecordQuery",
    "RecordService",
    "SORTABLE_FIELDS",
    "SortOrder",
]
