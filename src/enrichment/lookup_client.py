"""HTTP client for the age, gender and nationality lookup services."""

import asyncio
from typing import Dict, List, Optional
from urllib.parse import quote_plus

import aiohttp
import structlog
from pydantic import BaseModel, Field, ValidationError

from .exceptions import LookupDecodeError, LookupStatusError, LookupTransportError
from .interfaces import Dimension, LookupFailure, LookupOutcome, LookupSuccess, UNKNOWN_NATIONALITY

# Total time allowed for one request, connection through body. Never retried.
LOOKUP_TIMEOUT_SECONDS = 10

DEFAULT_ENDPOINTS = {
    Dimension.AGE: "https://api.agify.io/?name={name}",
    Dimension.GENDER: "https://api.genderize.io/?name={name}",
    Dimension.NATIONALITY: "https://api.nationalize.io/?name={name}",
}


class AgeResponse(BaseModel):
    """agify.io payload. ``age`` is null when the service has no data."""
    name: str = ""
    age: Optional[int] = Field(default=None, ge=0, strict=True)
    count: int = 0

    @property
    def value(self) -> int:
        return self.age or 0


class GenderResponse(BaseModel):
    """genderize.io payload."""
    name: str = ""
    gender: Optional[str] = None
    probability: float = 0.0
    count: int = 0

    @property
    def value(self) -> str:
        return self.gender or ""


class CountryProbability(BaseModel):
    country_id: str
    probability: float = 0.0


class NationalityResponse(BaseModel):
    """nationalize.io payload."""
    name: str = ""
    country: Optional[List[CountryProbability]] = None

    @property
    def value(self) -> str:
        # The service orders countries itself, the first one wins
        if not self.country:
            return UNKNOWN_NATIONALITY
        return self.country[0].country_id


RESPONSE_MODELS = {
    Dimension.AGE: AgeResponse,
    Dimension.GENDER: GenderResponse,
    Dimension.NATIONALITY: NationalityResponse,
}


class LookupClient:
    """Fetches one enrichment dimension per call from its external service.

    The aiohttp session is shared by every call and may be injected; a
    session created here is closed by ``close()`` or on leaving the
    ``async with`` block.
    """

    def __init__(
        self,
        endpoints: Dict[Dimension, str] = None,
        session: aiohttp.ClientSession = None,
        timeout: float = LOOKUP_TIMEOUT_SECONDS,
        logger=None,
    ):
        self.endpoints = dict(DEFAULT_ENDPOINTS)
        if endpoints:
            self.endpoints.update({Dimension(k): v for k, v in endpoints.items()})
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self.logger = logger or structlog.get_logger().bind(component="lookup_client")

    async def __aenter__(self):
        await self._get_session()
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self):
        """Close HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def build_url(self, dimension: Dimension, name: str) -> str:
        return self.endpoints[dimension].format(name=quote_plus(name))

    async def fetch(self, dimension: Dimension, name: str) -> LookupOutcome:
        """Look up one dimension for ``name``.

        Never raises for service or network problems; they come back as a
        ``LookupFailure`` carrying a transport, status or decode error.
        """
        dimension = Dimension(dimension)
        url = self.build_url(dimension, name)
        session = await self._get_session()

        self.logger.debug("lookup_started", dimension=dimension.value, name=name)

        try:
            async with session.get(url, timeout=self._timeout) as resp:
                if resp.status != 200:
                    return self._failure(LookupStatusError(dimension.value, resp.status))
                body = await resp.read()
        except asyncio.TimeoutError:
            return self._failure(LookupTransportError(
                dimension.value, f"request timed out after {self._timeout.total}s"
            ))
        except aiohttp.ClientError as e:
            return self._failure(LookupTransportError(dimension.value, str(e) or type(e).__name__))

        try:
            payload = RESPONSE_MODELS[dimension].model_validate_json(body)
        except ValidationError as e:
            return self._failure(LookupDecodeError(
                dimension.value, f"failed to decode {dimension.value} response: {e.errors()[0]['msg']}"
            ))

        return LookupSuccess(dimension=dimension, value=payload.value)

    async def get_age(self, name: str) -> LookupOutcome:
        return await self.fetch(Dimension.AGE, name)

    async def get_gender(self, name: str) -> LookupOutcome:
        return await self.fetch(Dimension.GENDER, name)

    async def get_nationality(self, name: str) -> LookupOutcome:
        return await self.fetch(Dimension.NATIONALITY, name)

    def _failure(self, error) -> LookupFailure:
        self.logger.warning(
            "lookup_failed",
            dimension=error.dimension,
            kind=error.kind,
            status=getattr(error, "status", None),
            error=error.detail,
        )
        return LookupFailure(dimension=Dimension(error.dimension), error=error)
