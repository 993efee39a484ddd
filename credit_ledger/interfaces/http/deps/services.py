"""Service dependency providers backed by the application container."""

from fastapi import Depends, Request

from credit_ledger.core.container import ApplicationContainer
from credit_ledger.infrastructure.database import Database
from credit_ledger.modules.ledger import LedgerService
from credit_ledger.modules.records import RecordService
from credit_ledger.modules.users import UserService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_database(container: ApplicationContainer = Depends(get_container)) -> Database:
    return container.database


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    return UserService.from_database(database)


def get_record_service(database: Database = Depends(get_database)) -> RecordService:
    return RecordService.from_database(database)


def get_ledger_service(container: ApplicationContainer = Depends(get_container)) -> LedgerService:
    return LedgerService.from_database(container.database, container.random_strings)


__all__ = [
    "get_container",
    "get_database",
    "get_ledger_service",
    "get_record_service",
    "get_user_service",
]
