# enellerett/adapters/api/main.py
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from enellerett.core.domain.exceptions import DomainError, KeyNotFoundError, LexiconLoadError
from enellerett.shared.config import settings
from enellerett.shared.container import Container
from enellerett.shared.logging_config import configure_logging
from enellerett.shared.observability import setup_observability

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from enellerett.adapters.api.routers import game, health, lookup, site

logger = structlog.get_logger()

WIRED_MODULES = [
    "enellerett.adapters.api.dependencies",
    "enellerett.adapters.api.routers.health",
    "enellerett.adapters.api.routers.game",
    "enellerett.adapters.api.routers.lookup",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manages the application lifecycle.
    1. Startup: wires the container, loads the lexicon, starts the hit writer.
    2. Shutdown: flushes pending hits.

    A LexiconLoadError escapes from here on purpose: the server must not
    start with a missing or partial lexicon.
    """
    container: Container = app.state.container
    container.wire(modules=WIRED_MODULES)

    try:
        store = container.lexicon_store()
    except LexiconLoadError as e:
        logger.critical("lexicon_load_failed", path=e.path, error=e.message)
        container.unwire()
        raise
    logger.info("app_startup", env=settings.APP_ENV.value, entries=len(store))

    recorder = container.hit_recorder()
    recorder.start()

    yield

    logger.info("app_shutdown")
    recorder.stop()
    container.unwire()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Swedish noun gender lookup: en or ett?",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )
    app.state.container = container or Container()

    # Global Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Binds request details to every log line emitted while serving it."""
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=str(uuid.uuid4()),
            method=request.method,
            path=request.url.path,
        )
        logger.info(
            "request_received",
            query=request.url.query,
            host=request.headers.get("host"),
            user_agent=request.headers.get("user-agent"),
            client=request.client.host if request.client else None,
        )
        response = await call_next(request)
        logger.info("request_completed", status=response.status_code)
        return response

    # Global Exception Handlers
    @app.exception_handler(KeyNotFoundError)
    async def invariant_violation_handler(request: Request, exc: KeyNotFoundError):
        """
        A key that should exist does not. Fails this request only.
        """
        logger.error("invariant_violation", key=exc.key, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": exc.message if settings.DEBUG else "Internal Server Error",
            },
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.error("domain_error", error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "code": 500, "message": exc.message},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )

    if settings.OTEL_ENABLED:
        setup_observability(app)

    # Register Routers (lookup last: its path route catches everything)
    app.include_router(health.router)
    app.include_router(site.router)
    app.include_router(game.router)
    app.include_router(lookup.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "enellerett.adapters.api.main:create_app",
        host=settings.HOST,
        port=settings.PORT,
        factory=True,
    )


if __name__ == "__main__":
    run()
