"""Domain models for ledger users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(slots=True)
class User:
    id: str
    username: str
    balance: int
    status: UserStatus = UserStatus.ACTIVE
    email: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    id: str
    email: Optional[str]
    username: str
    balance: int = 0

    @classmethod
    def from_identity_attributes(cls, attributes: Mapping[str, Any]) -> "UserCreateInput":
        """Build the insert payload from identity provider user attributes."""
        sub = attributes.get("sub")
        if not sub:
            raise ValueError("Identity attributes are missing 'sub'")
        email = attributes.get("email")
        username = attributes.get("preferred_username") or email
        if not username:
            raise ValueError("Identity attributes carry neither preferred_username nor email")
        return cls(id=str(sub), email=email, username=str(username))
