"""Interface definitions for person records."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .exceptions import InvalidFilterError


# Fields a listing can be filtered on, each by equality
FILTER_FIELDS = ("name", "surname", "nationality")


@dataclass
class Person:
    """A stored person with its enrichment."""
    id: Optional[int] = None
    name: str = ""
    surname: str = ""
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def merged(self, changes: dict) -> "Person":
        """Copy with ``changes`` applied.

        Empty strings and None leave the field as it is, so partial
        updates only touch what the caller actually sent. ``age`` is
        applied whenever it is not None, including 0.
        """
        editable = ("name", "surname", "patronymic", "age", "gender", "nationality")
        applied = {
            k: v for k, v in changes.items()
            if k in editable and v is not None and v != ""
        }
        return replace(self, **applied)


@dataclass
class PersonFilter:
    """Listing filter; empty values are not filtered on."""
    name: Optional[str] = None
    surname: Optional[str] = None
    nationality: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: getattr(self, k) for k in FILTER_FIELDS if getattr(self, k)}

    @classmethod
    def from_dict(cls, data: dict) -> "PersonFilter":
        """Create from dictionary, rejecting unknown fields."""
        for key in data:
            if key not in FILTER_FIELDS:
                raise InvalidFilterError(key)
        return cls(**data)


class PersonStorageInterface:
    """Interface for person storage."""

    def create(self, person: Person) -> int:
        """Insert person, return its new ID."""
        raise NotImplementedError

    def get_by_id(self, person_id: int) -> Person:
        """Get person by ID, raise NotFoundError if missing."""
        raise NotImplementedError

    def get_all(self, filters: Dict[str, str], page: int, limit: int) -> Tuple[List[Person], int]:
        """Get one page of matching persons and the total match count."""
        raise NotImplementedError

    def update(self, person: Person) -> None:
        """Overwrite a stored person, raise NotFoundError if missing."""
        raise NotImplementedError

    def delete(self, person_id: int) -> None:
        """Delete person, raise NotFoundError if missing."""
        raise NotImplementedError

    def count(self) -> int:
        """Total number of stored persons."""
        raise NotImplementedError
