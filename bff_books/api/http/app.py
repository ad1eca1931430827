"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import PlainTextResponse, Response

from bff_books.api.http.app_data import ApplicationDependencies, build_dependencies
from bff_books.api.http.routers import books_router, health_router
from bff_books.api.utils.app_startup import configure_logging
from bff_books.core.exceptions import BookNotFoundError
from bff_books.runtime.config.config_data import ConfigData
from bff_books.runtime.context import get_config

ERROR_PREFIX = "Some error occurred "
UNMATCHED_ROUTE = "<unmatched>"


def error_response(exc: BaseException, status_code: int = 500) -> PlainTextResponse:
    """The single error body shape of the API."""
    return PlainTextResponse(f"{ERROR_PREFIX}{exc}", status_code=status_code)


def _record_error(request: Request) -> None:
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    if app_deps is not None:
        app_deps.metrics.record_error()


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)
    app.state.app_dependencies = build_dependencies(config)
    logger.info("Publishing new books on channel '{}'", config.redis.channel)


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        await app_dependencies.redis_service.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            # Uniform handler for anything the routes did not handle
            _record_error(request)
            logger.bind(
                status_code=500,
                error_type=type(exc).__name__,
            ).exception("request.error")
            response = error_response(exc)

        duration = time.perf_counter() - start
        # Unmatched paths share one label
        route = getattr(request.scope.get("route"), "path", UNMATCHED_ROUTE)
        app_deps: ApplicationDependencies | None = getattr(
            request.app.state, "app_dependencies", None
        )
        if app_deps is not None:
            app_deps.metrics.observe(
                request.method, route, response.status_code, duration
            )

        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 1),
        ).info("request.end")

        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Exception handlers ---
async def book_not_found_handler(request: Request, exc: BookNotFoundError):
    _record_error(request)
    config: ConfigData = request.app.state.config
    status_code = 404 if config.api.strict_not_found else 500
    logger.bind(book_id=str(exc.book_id)).warning("Book lookup failed: {}", exc)
    return error_response(exc, status_code=status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    _record_error(request)
    logger.bind(status_code=422).warning("request.validation_error")
    return await request_validation_exception_handler(request, exc)


# --- Application factory ---
def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Configuration to run with, the current context's by default.
    """
    config = config or get_config()
    configure_logging(config)

    app = FastAPI(
        title=config.app.title,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )
    app.state.config = config

    app.middleware("http")(log_requests)

    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router)
    app.include_router(books_router)

    if config.metrics.enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics(request: Request) -> Response:
            app_deps: ApplicationDependencies = request.app.state.app_dependencies
            payload, content_type = app_deps.metrics.render()
            return Response(content=payload, media_type=content_type)

    return app


app = create_app()

__all__ = ["UNMATCHED_ROUTE", "app", "create_app", "startup", "shutdown"]
