"""
Pytest configuration for the credit ledger.

Provides fixtures for:
- Settings pointing at a throwaway SQLite database per test
- A bootstrapped application container with a mocked random.org transport
- The ASGI app and an httpx client bound to it
- Factories for users and records
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from credit_ledger.core.config import DatabaseSettings, LoggingSettings, Settings
from credit_ledger.core.container import ApplicationContainer
from credit_ledger.infrastructure.database import Database, bootstrap_schema
from credit_ledger.infrastructure.random_org import RandomStringClient
from credit_ledger.main import create_app
from credit_ledger.modules.operations import Operation, OperationService
from credit_ledger.modules.records import Record, RecordCreateInput, RecordService
from credit_ledger.modules.users import User, UserService

RANDOM_STRING = "AbC123xYz9"


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=sqlite_url(tmp_path / "ledger.db"), bootstrap_on_startup=False),
        logging=LoggingSettings(level="WARNING"),
    )


@pytest.fixture
def random_org_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def random_org_transport(random_org_requests: list[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        random_org_requests.append(request)
        return httpx.Response(200, text=f"{RANDOM_STRING}\n")

    return httpx.MockTransport(handler)


@pytest_asyncio.fixture
async def container(
    test_settings: Settings, random_org_transport: httpx.MockTransport
) -> AsyncIterator[ApplicationContainer]:
    container = ApplicationContainer(
        settings=test_settings,
        database=Database(test_settings.database),
        random_strings=RandomStringClient(test_settings.random_org, transport=random_org_transport),
    )
    await bootstrap_schema(container.database)
    try:
        yield container
    finally:
        await container.shutdown()


@pytest.fixture
def database(container: ApplicationContainer) -> Database:
    return container.database


@pytest.fixture
def app(container: ApplicationContainer) -> Iterator[FastAPI]:
    app = create_app(container)
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def user_service(database: Database) -> UserService:
    return UserService.from_database(database)


@pytest.fixture
def record_service(database: Database) -> RecordService:
    return RecordService.from_database(database)


@pytest.fixture
def operation_service(container: ApplicationContainer) -> OperationService:
    return OperationService.from_database(container.database, container.random_strings)


@pytest.fixture
def make_user(user_service: UserService) -> Callable[..., Awaitable[User]]:
    async def factory(user_id: str = "user-1", balance: int = 100, username: str | None = None) -> User:
        await user_service.create_user(
            {"sub": user_id, "email": f"{user_id}@example.com", "preferred_username": username}
        )
        await user_service.update_user_balance(user_id, balance)
        user = await user_service.get_user_by_id(user_id)
        assert user is not None
        return user

    return factory


@pytest.fixture
def get_operation(operation_service: OperationService) -> Callable[[str], Awaitable[Operation]]:
    async def lookup(operation_type: str) -> Operation:
        operation = await operation_service.get_operation_by_type(operation_type)
        assert operation is not None
        return operation

    return lookup


@pytest.fixture
def make_record(
    record_service: RecordService, get_operation: Callable[[str], Awaitable[Operation]]
) -> Callable[..., Awaitable[Record]]:
    async def factory(
        user_id: str = "user-1",
        operation_type: str = "addition",
        *,
        user_balance: int = 99,
        response: str | None = "3",
        created_at: datetime | None = None,
    ) -> Record:
        operation = await get_operation(operation_type)
        return await record_service.create_record(
            RecordCreateInput(
                operation_id=operation.id,
                user_id=user_id,
                amount=operation.cost,
                user_balance=user_balance,
                operation_response=response,
                created_at=created_at or datetime.now(timezone.utc),
            )
        )

    return factory
