"""Errors raised while looking up and aggregating name enrichment."""

from typing import Optional


class LookupFailedError(Exception):
    """A single external lookup did not produce a value."""

    kind = "lookup"

    def __init__(self, dimension: str, detail: str):
        self.dimension = dimension
        self.detail = detail
        super().__init__(f"failed to get {dimension}: {detail}")


class LookupTransportError(LookupFailedError):
    """Connection, timeout or body transfer failure."""

    kind = "transport"


class LookupStatusError(LookupFailedError):
    """The service answered with a status other than 200."""

    kind = "status"

    def __init__(self, dimension: str, status: int, detail: Optional[str] = None):
        self.status = status
        super().__init__(dimension, detail or f"status code {status}")


class LookupDecodeError(LookupFailedError):
    """The response body did not match the expected JSON schema."""

    kind = "decode"


class EnrichmentError(Exception):
    """Enrichment failed; wraps the lookup error chosen by priority order."""

    def __init__(self, dimension: str, cause: LookupFailedError):
        self.dimension = dimension
        self.cause = cause
        super().__init__(f"failed to enrich person data: {cause}")
