"""
Advertising Contract API

REST boundary over the contract kernel: contract creation, retrieval,
listing and cancellation, plus company/product lookups for the UI.
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import FastAPI, Request

from contract_api.errors import install_exception_handlers
from contract_api.routes import companies_router, contracts_router, products_router
from contract_api.schemas import HealthResponse
from contract_kernel import __version__
from contract_kernel.config import Settings, load_settings
from contract_kernel.db.engine import create_tables, init_engine_from_url
from contract_kernel.domain.clock import Clock
from contract_kernel.logging_config import LogContext, configure_logging, get_logger

SERVICE_NAME = "contract_api"
REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger("api.app")


def create_app(
    settings: Settings | None = None,
    clock: Clock | None = None,
    initialize_database: bool = True,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Resolved settings; ``load_settings()`` if omitted.
        clock: Clock used for every "now"/"today"; a SystemClock in the
            configured timezone if omitted.
        initialize_database: Initialize the engine from
            ``settings.database_url`` and create missing tables.  Pass False
            when the caller has already initialized the engine (tests).
    """
    settings = settings or load_settings()
    clock = clock or settings.make_clock()

    configure_logging(level=settings.log_level)

    if initialize_database:
        init_engine_from_url(settings.database_url, echo=settings.sql_echo)
        create_tables()

    app = FastAPI(
        title="Advertising Contract API",
        description="Advertising contract lifecycle management",
        version=__version__,
    )
    app.state.settings = settings
    app.state.clock = clock

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        with LogContext.bind(request_id=request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health() -> HealthResponse:
        return HealthResponse(status="healthy", service=SERVICE_NAME, version=__version__)

    app.include_router(contracts_router)
    app.include_router(companies_router)
    app.include_router(products_router)
    install_exception_handlers(app)

    logger.info(
        "app_created",
        extra={"service": SERVICE_NAME, "timezone": settings.timezone},
    )
    return app
