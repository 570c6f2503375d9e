"""
Flavourly API entry point.

Builds the FastAPI app: logging, schema creation on startup, CORS, request
logging, error handlers and the route modules.
"""

import logging
from contextlib import asynccontextmanager

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from api.routes import include_routers
from app.config import settings
from domain import models as db_models

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("flavourly.main")


async def _create_schema_with_retries() -> None:
    """The database container may still be starting; retry create_all a few times."""
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            await anyio.to_thread.run_sync(db_models.init_database)
        except Exception as exc:
            if attempt == settings.db_init_attempts:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                raise
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            await anyio.sleep(settings.db_init_delay_sec)
        else:
            _logger.info("Database initialization succeeded")
            return


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(
        "Starting %s %s (%s) against %s",
        settings.app_name,
        settings.app_version,
        settings.environment.value,
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    await _create_schema_with_retries()
    try:
        yield
    finally:
        _logger.info("Shutting down %s", settings.app_name)
        db_models.engine.dispose()


docs_enabled = not settings.is_production()

app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
    docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
    redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)
include_routers(app, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
