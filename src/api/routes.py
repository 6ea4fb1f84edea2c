"""Versioned routes for person records."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from .schemas import ErrorResponse, PersonCreate, PersonListResponse, PersonResponse, PersonUpdate
from ..persons.interfaces import PersonFilter
from ..persons.service import PersonService

router = APIRouter(prefix="/persons", tags=["persons"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def get_person_service(request: Request) -> PersonService:
    return request.app.state.person_service


@router.post(
    "",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def create_person(body: PersonCreate, service: PersonService = Depends(get_person_service)):
    """Create a person enriched with age, gender and nationality."""
    person = await service.create(body.name, body.surname, body.patronymic)
    return PersonResponse.from_person(person)


@router.get("", response_model=PersonListResponse)
def list_persons(
    page: int = Query(1),
    limit: int = Query(10),
    name: Optional[str] = Query(None),
    surname: Optional[str] = Query(None),
    nationality: Optional[str] = Query(None),
    service: PersonService = Depends(get_person_service),
):
    """List persons, optionally filtered, one page at a time."""
    filters = PersonFilter(name=name, surname=surname, nationality=nationality).to_dict()
    persons, total, page, limit = service.get_all(filters, page, limit)
    return PersonListResponse(
        data=[PersonResponse.from_person(p) for p in persons],
        total_count=total,
        page=page,
        limit=limit,
    )


@router.get("/{person_id}", response_model=PersonResponse, responses=NOT_FOUND)
def get_person(person_id: int, service: PersonService = Depends(get_person_service)):
    return PersonResponse.from_person(service.get_by_id(person_id))


@router.put("/{person_id}", response_model=PersonResponse, responses=NOT_FOUND)
def update_person(
    person_id: int,
    body: PersonUpdate,
    service: PersonService = Depends(get_person_service),
):
    """Update the fields present in the body; enrichment is not re-run."""
    person = service.get_by_id(person_id)
    person = service.update(person.merged(body.model_dump()))
    return PersonResponse.from_person(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_person(person_id: int, service: PersonService = Depends(get_person_service)):
    service.delete(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
