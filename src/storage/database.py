"""Database operations for person storage."""

from contextlib import contextmanager
from datetime import datetime
from typing import Dict, List, Tuple
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError
import structlog

from .models import PersonModel, init_db
from ..persons.exceptions import InvalidFilterError, NotFoundError, StorageError
from ..persons.interfaces import Person, PersonStorageInterface

# Filterable fields mapped to the columns they compare against
FILTER_COLUMNS = {
    "name": PersonModel.name,
    "surname": PersonModel.surname,
    "nationality": PersonModel.nationality,
}


class PersonStorage(PersonStorageInterface):
    """SQLAlchemy-based storage for persons (SQLite or PostgreSQL)."""

    def __init__(self, database_url: str, logger=None):
        self.logger = logger or structlog.get_logger().bind(component="person_storage")

        # Ensure data directory exists
        if database_url.startswith("sqlite:///"):
            db_path = database_url.replace("sqlite:///", "")
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        # create_all is the first statement sent, so it also proves the database answers
        try:
            self.engine = init_db(database_url)
        except SQLAlchemyError as e:
            self.logger.error("storage_error", operation="connect database", error=str(e))
            raise StorageError("connect database", str(e)) from e
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)

    @contextmanager
    def _session(self, operation: str):
        """Yield a session, wrapping database errors with the operation name."""
        session = self.Session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            self.logger.error("storage_error", operation=operation, error=str(e))
            raise StorageError(operation, str(e)) from e
        finally:
            session.close()

    def ping(self) -> None:
        """Run a trivial query, raising StorageError if the database is unreachable."""
        with self._session("ping database") as session:
            session.execute(text("SELECT 1"))

    def create(self, person: Person) -> int:
        """Insert person, return its new ID."""
        now = datetime.utcnow()
        with self._session("create person") as session:
            model = PersonModel(
                name=person.name,
                surname=person.surname,
                patronymic=person.patronymic or "",
                age=person.age,
                gender=person.gender,
                nationality=person.nationality,
                created_at=person.created_at or now,
                updated_at=person.updated_at or now,
            )
            session.add(model)
            session.commit()
            person.created_at = model.created_at
            person.updated_at = model.updated_at
            self.logger.debug("person_saved", id=model.id)
            return model.id

    def get_by_id(self, person_id: int) -> Person:
        """Get person by ID."""
        with self._session("get person") as session:
            model = session.get(PersonModel, person_id)
            if model is None:
                raise NotFoundError(person_id)
            return self._model_to_person(model)

    def get_all(self, filters: Dict[str, str], page: int, limit: int) -> Tuple[List[Person], int]:
        """Get one page of matching persons, ordered by ID, and the total match count."""
        conditions = []
        for key, value in (filters or {}).items():
            column = FILTER_COLUMNS.get(key)
            if column is None:
                raise InvalidFilterError(key)
            conditions.append(column == value)

        with self._session("get persons") as session:
            query = session.query(PersonModel).filter(*conditions)
            total = query.count()
            models = query\
                .order_by(PersonModel.id)\
                .offset((page - 1) * limit)\
                .limit(limit)\
                .all()
            return [self._model_to_person(m) for m in models], total

    def update(self, person: Person) -> None:
        """Overwrite stored fields and refresh updated_at."""
        with self._session("update person") as session:
            model = session.get(PersonModel, person.id)
            if model is None:
                raise NotFoundError(person.id)

            person.updated_at = datetime.utcnow()
            model.name = person.name
            model.surname = person.surname
            model.patronymic = person.patronymic or ""
            model.age = person.age
            model.gender = person.gender
            model.nationality = person.nationality
            model.updated_at = person.updated_at
            session.commit()
            self.logger.debug("person_saved", id=person.id)

    def delete(self, person_id: int) -> None:
        """Delete person by ID."""
        with self._session("delete person") as session:
            deleted = session.query(PersonModel)\
                .filter(PersonModel.id == person_id)\
                .delete()
            if deleted == 0:
                raise NotFoundError(person_id)
            session.commit()
            self.logger.debug("person_removed", id=person_id)

    def count(self) -> int:
        """Total number of stored persons."""
        with self._session("count persons") as session:
            return session.query(PersonModel).count()

    def _model_to_person(self, model: PersonModel) -> Person:
        """Convert database model to Person."""
        return Person(
            id=model.id,
            name=model.name,
            surname=model.surname,
            patronymic=model.patronymic or "",
            age=model.age,
            gender=model.gender,
            nationality=model.nationality,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
