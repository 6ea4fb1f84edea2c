"""SQLAlchemy models for the person database."""

from datetime import datetime

from sqlalchemy import create_engine, Column, Integer, String, DateTime, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PersonModel(Base):
    """Database model for enriched persons."""
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Identity
    name = Column(String(255), nullable=False)
    surname = Column(String(255), nullable=False)
    patronymic = Column(String(255), nullable=False, default="")

    # Enrichment, filled once at creation
    age = Column(Integer, nullable=False, default=0)
    gender = Column(String(32), nullable=False, default="")
    nationality = Column(String(32), nullable=False, default="")

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index('idx_persons_name', 'name'),
        Index('idx_persons_surname', 'surname'),
        Index('idx_persons_nationality', 'nationality'),
    )


def init_db(database_url: str):
    """Initialize database and create all tables."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are opened from FastAPI's worker threads
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return engine
