"""Person service: creation with enrichment, plus CRUD over storage."""

from datetime import datetime
from typing import List, Mapping, Optional, Tuple

import structlog

from .exceptions import ValidationError
from .interfaces import Person, PersonFilter, PersonStorageInterface
from ..enrichment.enrichment_service import EnrichmentService

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class PersonService:
    """Orchestrates person records.

    Enrichment runs only in ``create``; updates never re-run it. Errors
    from the enricher and from storage propagate unchanged, each is logged
    where it is raised.
    """

    def __init__(self, storage: PersonStorageInterface, enricher: EnrichmentService, logger=None):
        self.storage = storage
        self.enricher = enricher
        self.logger = logger or structlog.get_logger().bind(component="person_service")

    async def create(self, name: str, surname: str, patronymic: Optional[str] = None) -> Person:
        """Enrich and store a new person."""
        if not name or not name.strip():
            raise ValidationError("name is required")
        if not surname or not surname.strip():
            raise ValidationError("surname is required")

        self.logger.info("creating_person", name=name, surname=surname)

        # EnrichmentError propagates; nothing is stored on failure
        enrichment = await self.enricher.enrich(name)

        now = datetime.utcnow()
        person = Person(
            name=name,
            surname=surname,
            patronymic=patronymic or "",
            age=enrichment.age,
            gender=enrichment.gender,
            nationality=enrichment.nationality,
            created_at=now,
            updated_at=now,
        )
        person.id = self.storage.create(person)

        self.logger.info("person_created", person_id=person.id)
        return person

    def get_by_id(self, person_id: int) -> Person:
        self.logger.debug("getting_person", person_id=person_id)
        return self.storage.get_by_id(person_id)

    def get_all(
        self,
        filters: Mapping[str, str] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> Tuple[List[Person], int, int, int]:
        """List persons.

        Returns the page of persons, the total match count, and the page
        and limit actually used after normalization.
        """
        if page < 1:
            page = DEFAULT_PAGE
        if limit < 1:
            limit = DEFAULT_LIMIT

        # Round-trip through PersonFilter to reject unknown fields
        filter_dict = PersonFilter.from_dict(dict(filters or {})).to_dict()

        persons, total = self.storage.get_all(filter_dict, page, limit)
        self.logger.info(
            "persons_listed",
            filters=filter_dict,
            page=page,
            limit=limit,
            found=len(persons),
            total=total,
        )
        return persons, total, page, limit

    def update(self, person: Person) -> Person:
        self.storage.update(person)
        self.logger.info("person_updated", person_id=person.id)
        return person

    def delete(self, person_id: int) -> None:
        self.storage.delete(person_id)
        self.logger.info("person_deleted", person_id=person_id)
