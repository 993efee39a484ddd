"""User ledger domain exports"""

from .exceptions import UserError, UserNotFoundError
from .models import User, UserCreateInput, UserStatus
from .service import UserService

__all__ = [
    "User",
    "UserCreateInput",
    "UserError",
    "UserNotFoundError",
    "UserService",
    "UserStatus",
]
