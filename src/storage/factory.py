"""Factory functions to create storage instances.

The database is picked from DATABASE_URL when set, otherwise from the
settings (SQLite for local development, PostgreSQL when NAMEIQ_DB_HOST is
configured). Both are served by the same SQLAlchemy storage.
"""

import os

import structlog

from .database import PersonStorage

logger = structlog.get_logger()


def get_database_url(config=None) -> str:
    """Get database URL from environment, with fallback to settings."""
    # Check for DATABASE_URL first (standard for cloud platforms)
    url = os.environ.get('DATABASE_URL')
    if url:
        return url

    if config is None:
        from ..config.settings import settings as config
    return config.dsn


def is_postgres(url: str) -> bool:
    """Check if the URL points at PostgreSQL."""
    return url.startswith('postgresql') or url.startswith('postgres://')


def normalize_url(url: str) -> str:
    """Pin bare postgres URLs to the psycopg2 driver."""
    for scheme in ('postgres://', 'postgresql://'):
        if url.startswith(scheme):
            return 'postgresql+psycopg2://' + url[len(scheme):]
    return url


def create_person_storage(config=None) -> PersonStorage:
    """Create person storage and verify the database answers.

    Raises StorageError when the database cannot be reached.
    """
    url = normalize_url(get_database_url(config))

    backend = "postgres" if is_postgres(url) else "sqlite"
    storage = PersonStorage(url)
    storage.ping()
    logger.info("using_storage", backend=backend, url=url.split("@")[-1][:40])
    return storage
