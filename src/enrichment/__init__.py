"""Name enrichment: age, gender and nationality from external lookup services."""

from .interfaces import (
    Dimension,
    DIMENSION_PRIORITY,
    EnrichmentResult,
    LookupFailure,
    LookupOutcome,
    LookupSuccess,
    UNKNOWN_NATIONALITY,
)
from .exceptions import (
    EnrichmentError,
    LookupDecodeError,
    LookupFailedError,
    LookupStatusError,
    LookupTransportError,
)
from .lookup_client import LookupClient, LOOKUP_TIMEOUT_SECONDS
from .enrichment_service import EnrichmentService

__all__ = [
    "Dimension",
    "DIMENSION_PRIORITY",
    "EnrichmentResult",
    "LookupFailure",
    "LookupOutcome",
    "LookupSuccess",
    "UNKNOWN_NATIONALITY",
    "EnrichmentError",
    "LookupDecodeError",
    "LookupFailedError",
    "LookupStatusError",
    "LookupTransportError",
    "LookupClient",
    "LOOKUP_TIMEOUT_SECONDS",
    "EnrichmentService",
]
