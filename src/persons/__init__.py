"""Person records and the service that creates and manages them."""

from .interfaces import Person, PersonFilter, PersonStorageInterface, FILTER_FIELDS
from .exceptions import InvalidFilterError, NotFoundError, PersonError, StorageError, ValidationError
from .service import PersonService

__all__ = [
    "Person",
    "PersonFilter",
    "PersonStorageInterface",
    "FILTER_FIELDS",
    "InvalidFilterError",
    "NotFoundError",
    "PersonError",
    "StorageError",
    "ValidationError",
    "PersonService",
]
