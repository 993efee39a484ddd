"""Domain service for the user side of the ledger.

Lookups fail closed: a database error is logged and reported as "not found",
so callers cannot tell the two apart. Mutations log and re-raise.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError

from credit_ledger.infrastructure.database import Database

from .exceptions import UserNotFoundError
from .models import User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)

LOOKUP_ERRORS = (SQLAlchemyError, OSError)


class UserService:
    """Encapsulates user ledger use cases."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def from_database(cls, database: Database) -> "UserService":
        # Deferred: the SQL repositories import this package for the domain models.
        from credit_ledger.infrastructure.database.repositories.user_repository import SqlUserRepository

        return cls(SqlUserRepository(database))

    async def get_user_by_id(self, user_id: str | None) -> User | None:
        if not user_id:
            return None
        try:
            user = await self._repository.get_by_id(user_id)
        except LOOKUP_ERRORS:
            logger.exception("Error getting user by ID %s", user_id)
            return None
        if user is None:
            logger.info("User not found by ID %s", user_id)
        else:
            logger.info("Fetched user by ID %s", user_id)
        return user

    async def get_user_by_username(self, username: str | None) -> User | None:
        if not username:
            return None
        try:
            user = await self._repository.get_by_username(username)
        except LOOKUP_ERRORS:
            logger.exception("Error getting user by username %s", username)
            return None
        if user is None:
            logger.info("User not found by username %s", username)
        else:
            logger.info("Fetched user by username %s", username)
        return user

    async def update_user_balance(self, user_id: str, new_balance: int) -> None:
        """Set the absolute balance of ``user_id``."""
        try:
            updated = await self._repository.set_balance(user_id, new_balance)
        except SQLAlchemyError:
            logger.exception("Error updating balance of user %s", user_id)
            raise
        if updated == 0:
            logger.error("Error updating balance: user %s not found", user_id)
            raise UserNotFoundError()
        logger.info("Updated balance of user %s to %s", user_id, new_balance)

    async def create_user(self, attributes: Mapping[str, Any]) -> None:
        """Provision a ledger user from identity attributes; repeated calls are no-ops."""
        try:
            payload = UserCreateInput.from_identity_attributes(attributes)
            await self._repository.create_if_missing(payload)
        except (ValueError, SQLAlchemyError):
            logger.exception("Error creating user")
            raise
        logger.info("Created new user %s", payload.id)
