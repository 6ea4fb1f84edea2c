"""Data models for name enrichment."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import LookupFailedError


UNKNOWN_NATIONALITY = "unknown"


class Dimension(str, Enum):
    """One enrichment aspect, each backed by its own external service."""
    AGE = "age"
    GENDER = "gender"
    NATIONALITY = "nationality"


# Failures are reported in this order, whatever order the lookups finished in
DIMENSION_PRIORITY = (Dimension.AGE, Dimension.GENDER, Dimension.NATIONALITY)


@dataclass(frozen=True)
class LookupSuccess:
    """A lookup that produced a value."""
    dimension: Dimension
    value: Union[int, str]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LookupFailure:
    """A lookup that failed; ``error`` says how."""
    dimension: Dimension
    error: LookupFailedError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def detail(self) -> str:
        return self.error.detail


LookupOutcome = Union[LookupSuccess, LookupFailure]


@dataclass(frozen=True)
class EnrichmentResult:
    """Age, gender and nationality inferred for one name."""
    age: int
    gender: str
    nationality: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "age": self.age,
            "gender": self.gender,
            "nationality": self.nationality,
        }
