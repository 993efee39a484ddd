"""Repository protocol for the operation catalog."""

from __future__ import annotations

from typing import Protocol

from .models import Operation


class OperationRepository(Protocol):
    async def get_by_type(self, operation_type: str) -> Operation | None:
        ...
