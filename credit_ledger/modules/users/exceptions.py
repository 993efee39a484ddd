"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserNotFoundError(UserError):
    """Raised when a balance update matched no user row."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)
