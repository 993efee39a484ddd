"""Reusable FastAPI dependencies."""

from .services import (
    get_container,
    get_database,
    get_ledger_service,
    get_record_service,
    get_user_service,
)

__all__ = [
    "get_container",
    "get_database",
    "get_ledger_service",
    "get_record_service",
    "get_user_service",
]
