"""SQLAlchemy-backed repository implementations."""

from .operation_repository import SqlOperationRepository
from .record_repository import SqlRecordRepository
from .user_repository import SqlUserRepository

__all__ = [
    "SqlOperationRepository",
    "SqlRecordRepository",
    "SqlUserRepository",
]
