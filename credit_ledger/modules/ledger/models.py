"""Value objects returned by the ledger workflow."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class OperationReceipt:
    result: str
    new_balance: int
    record_id: str
