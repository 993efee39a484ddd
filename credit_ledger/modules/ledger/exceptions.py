"""Ledger workflow exceptions; messages are safe to show to API clients."""


class LedgerError(Exception):
    """Base class for ledger workflow errors."""


class UnknownUserError(LedgerError):
    def __init__(self, message: str = "Invalid user") -> None:
        super().__init__(message)


class UnknownOperationError(LedgerError):
    def __init__(self, message: str = "Invalid operation type") -> None:
        super().__init__(message)


class InsufficientBalanceError(LedgerError):
    def __init__(self, message: str = "Insufficient balance") -> None:
        super().__init__(message)
