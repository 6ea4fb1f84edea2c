"""Errors raised by the person service and its storage."""


class PersonError(Exception):
    """Base class for person service errors."""


class ValidationError(PersonError):
    """Input rejected before any enrichment or persistence."""


class InvalidFilterError(ValidationError):
    """A listing filter used a field that cannot be filtered on."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"unsupported filter field: {field}")


class NotFoundError(PersonError):
    """No person with the given id."""

    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"person not found: {person_id}")


class StorageError(PersonError):
    """The database failed while running ``operation``."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"failed to {operation}: {detail}")
