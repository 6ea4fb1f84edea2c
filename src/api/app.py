"""FastAPI application for person records.

``create_app`` wires storage, the lookup client and the person service
at startup and closes the shared HTTP session on shutdown. Passing a
ready ``person_service`` skips that wiring, which is what the tests do.

Run with::

    python scripts/serve.py
"""

from contextlib import asynccontextmanager
from datetime import datetime

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .routes import router as persons_router
from ..config.logging_config import configure_logging
from ..config.settings import Settings, settings as default_settings
from ..enrichment.enrichment_service import EnrichmentService
from ..enrichment.exceptions import EnrichmentError
from ..enrichment.lookup_client import LookupClient
from ..persons.exceptions import NotFoundError, StorageError, ValidationError
from ..persons.service import PersonService
from ..storage.factory import create_person_storage

logger = structlog.get_logger()


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Map service errors to HTTP responses."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return _error(400, exc)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return _error(404, exc)

    @app.exception_handler(EnrichmentError)
    async def enrichment_failed(request: Request, exc: EnrichmentError):
        return _error(502, exc)

    @app.exception_handler(StorageError)
    async def storage_failed(request: Request, exc: StorageError):
        return _error(500, exc)


def create_app(config: Settings = None, person_service: PersonService = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if person_service is not None:
            yield
            return

        configure_logging(config.log_level, config.log_json)
        logger.info("starting_service")

        # A database that cannot be reached here aborts startup
        storage = create_person_storage(config)
        try:
            async with LookupClient(endpoints=config.lookup_endpoints()) as client:
                app.state.person_service = PersonService(storage, EnrichmentService(client))
                yield
        finally:
            storage.engine.dispose()
            logger.info("service_stopped")

    app = FastAPI(title="Name IQ Finder", version="1.0.0", lifespan=lifespan)
    if person_service is not None:
        app.state.person_service = person_service
    app.include_router(persons_router, prefix="/api/v1")
    register_error_handlers(app)

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint for load balancers."""
        storage = request.app.state.person_service.storage
        try:
            total = storage.count()
        except StorageError as e:
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "error": str(e)}
            )
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "database": "connected",
            "persons": total,
        }

    return app
