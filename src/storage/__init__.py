"""Database storage and models."""

from .database import PersonStorage
from .models import PersonModel, init_db

__all__ = ["PersonStorage", "PersonModel", "init_db"]
