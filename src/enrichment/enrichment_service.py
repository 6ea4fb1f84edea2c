"""Enrichment service combining the three name lookups into one result."""

import asyncio
import time

import structlog

from .exceptions import EnrichmentError
from .interfaces import DIMENSION_PRIORITY, Dimension, EnrichmentResult
from .lookup_client import LookupClient


class EnrichmentService:
    """Enriches a first name with age, gender and nationality.

    The three lookups run concurrently and are always awaited to
    completion: a failing lookup does not cancel the others, and no
    deadline applies beyond each lookup's own request timeout. Once all
    have finished, failures are checked in ``DIMENSION_PRIORITY`` order and
    the first one is raised as an ``EnrichmentError``.
    """

    def __init__(self, client: LookupClient, logger=None):
        self.client = client
        self.logger = logger or structlog.get_logger().bind(component="enrichment_service")

    async def enrich(self, name: str) -> EnrichmentResult:
        """Enrich ``name`` or raise ``EnrichmentError``."""
        start_time = time.monotonic()

        # gather keeps argument order, so slot i belongs to DIMENSION_PRIORITY[i]
        outcomes = await asyncio.gather(
            *(self.client.fetch(dimension, name) for dimension in DIMENSION_PRIORITY)
        )
        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        for outcome in outcomes:
            if not outcome.ok:
                self.logger.error(
                    "enrichment_failed",
                    name=name,
                    dimension=outcome.dimension.value,
                    kind=outcome.kind,
                    time_ms=elapsed_ms,
                )
                raise EnrichmentError(outcome.dimension.value, outcome.error) from outcome.error

        values = {outcome.dimension: outcome.value for outcome in outcomes}
        result = EnrichmentResult(
            age=values[Dimension.AGE],
            gender=values[Dimension.GENDER],
            nationality=values[Dimension.NATIONALITY],
        )

        self.logger.info("name_enriched", name=name, time_ms=elapsed_ms, **result.to_dict())
        return result
