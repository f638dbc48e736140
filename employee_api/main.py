"""
FastAPI Application Entry Point
=============================================================================
CONCEPT: FastAPI Application Lifecycle

  1. Startup: configure logging, provision the SQLite database (optional
     reset, schema, seeding), open the async engine, load the role store.
  2. Request handling: routes read the storage handle and role store from
     app.state through dependencies.
  3. Shutdown: dispose the engine (closes pooled connections).

CONCEPT: One error shape
Every failure leaves the app as `{"error": "<detail>"}`:
  - APIError subclasses           -> their own status code
  - Starlette HTTP errors (404s for unknown routes, 405s) -> same status
  - request validation errors     -> 400
  - anything else                 -> 500 "Internal Server Error", logged
    with its traceback

Run with: uvicorn employee_api.main:app --port 9090
      or: python -m employee_api
=============================================================================
"""

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.api.router import api_router
from employee_api.config import Settings, settings
from employee_api.core.errors import APIError, status_text_for
from employee_api.db.accessor import StorageAccessor
from employee_api.db.engine import create_engine, reset_database_file
from employee_api.db.seed import prepare_database
from employee_api.lookup.roles import load_roles
from employee_api.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Everything before `yield` runs on startup, everything after on shutdown.
    """
    app_settings: Settings = app.state.settings

    # === STARTUP ===
    setup_logging(app_settings.log_level, debug=app_settings.debug)
    logger.info("app_starting", app=app_settings.app_name, env=app_settings.app_env)

    if app_settings.reset_database:
        reset_database_file(app_settings.database_url)

    engine = create_engine(app_settings.database_url, echo=app_settings.debug)
    seeded = await prepare_database(engine, app_settings)
    logger.info("database_ready", seeded=seeded)

    app.state.engine = engine
    app.state.accessor = StorageAccessor(
        engine, timeout_seconds=app_settings.query_timeout_seconds
    )
    app.state.role_store = load_roles(app_settings.roles_file)

    yield  # Application is running and handling requests

    # === SHUTDOWN ===
    await engine.dispose()
    logger.info("app_stopped")


# =============================================================================
# Exception handlers
# =============================================================================
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.code >= 500:
        logger.error("api_error", status=exc.code, detail=exc.detail)
    else:
        logger.info("api_error", status=exc.code, detail=exc.detail)
    return JSONResponse(status_code=exc.code, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else status_text_for(exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("query", "path"))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "Bad Request"})


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return JSONResponse(status_code=500, content={"error": status_text_for(500)})


# =============================================================================
# Application factory
# =============================================================================
def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app around an explicit Settings instance."""
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="Paginated, filterable employee directory with role lookup data.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        # Every log line emitted while serving this request carries these fields
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(api_router)
    return app


# Used by uvicorn: uvicorn employee_api.main:app
app = create_app()
