"""Record store specific exceptions."""


class RecordError(Exception):
    """Base class for record store errors."""


class InvalidSortFieldError(RecordError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid sortBy: {field}")
        self.field = field
