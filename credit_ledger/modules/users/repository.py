"""Repository protocol for users."""

from __future__ import annotations

from typing import Protocol

from .models import User, UserCreateInput


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def get_by_id(self, user_id: str) -> User | None:
        ...

    async def get_by_username(self, username: str) -> User | None:
        ...

    async def set_balance(self, user_id: str, balance: int) -> int:
        """Return the number of rows updated."""
        ...

    async def create_if_missing(self, payload: UserCreateInput) -> None:
        ...
