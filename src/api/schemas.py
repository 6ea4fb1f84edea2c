"""Request and response bodies for the persons API."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..persons.interfaces import Person


class PersonCreate(BaseModel):
    name: str
    surname: str
    patronymic: Optional[str] = None


class PersonUpdate(BaseModel):
    """Partial update; omitted or empty fields keep their stored value."""
    name: Optional[str] = None
    surname: Optional[str] = None
    patronymic: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = None
    nationality: Optional[str] = None


class PersonResponse(BaseModel):
    id: int
    name: str
    surname: str
    patronymic: str = ""
    age: int
    gender: str
    nationality: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_person(cls, person: Person) -> "PersonResponse":
        return cls(
            id=person.id,
            name=person.name,
            surname=person.surname,
            patronymic=person.patronymic,
            age=person.age,
            gender=person.gender,
            nationality=person.nationality,
            created_at=person.created_at,
            updated_at=person.updated_at,
        )


class PersonListResponse(BaseModel):
    data: List[PersonResponse]
    total_count: int
    page: int
    limit: int


class ErrorResponse(BaseModel):
    error: str
