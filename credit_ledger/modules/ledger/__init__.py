"""Ledger workflow: charge an operation against a balance and audit it."""

from .exceptions import InsufficientBalanceError, LedgerError, UnknownOperationError, UnknownUserError
from .models import OperationReceipt
from .service import LedgerService

__all__ = [
    "InsufficientBalanceError",
    "LedgerError",
    "LedgerService",
    "OperationReceipt",
    "UnknownOperationError",
    "UnknownUserError",
]
