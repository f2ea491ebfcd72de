"""FastAPI application for the user service.

``create_app(settings)`` binds one ``Settings`` instance to the app: the
lifespan opens the database engine from it and request dependencies read
it from ``app.state``. Users live under ``/api/v1/user``; ``/health`` and
``/`` stay unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userbase.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
)
from userbase.presentation.api.exception_handlers import setup_exception_handlers
from userbase.presentation.api.routers import users_router
from userbase.presentation.api.schemas import HealthResponse
from userbase_config.settings import Settings, get_settings

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"
USERS_PATH = f"{API_V1_PREFIX}/user"

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "uvicorn.access")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _configure_logging(log_level: str) -> None:
    """Log to stdout at ``log_level``; third-party loggers stay at WARNING."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("userbase").setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    logger.info(
        "Starting userbase API v%s (database: %s)",
        API_VERSION,
        settings.database_type,
    )
    engine = create_engine(settings.database_url)
    try:
        await create_tables(engine)
    except OSError:
        logger.critical("Could not connect to the %s database", settings.database_type)
        await engine.dispose()
        raise

    app.state.session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/user", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API; ``settings`` defaults to the environment-derived ones."""
    if settings is None:
        settings = get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts: create, list, fetch, update, delete.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Accounts with a unique email; listing is "
                "paginated with `page` and `pageSize`.",
            },
            {"name": "Health", "description": "Liveness probe."},
            {"name": "Info", "description": "Entry points of this API."},
        ],
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        return {
            "name": app.title,
            "version": API_VERSION,
            "docs": app.docs_url,
            "api_base": API_V1_PREFIX,
            "endpoints": {"health": "/health", "users": USERS_PATH},
        }

    return app


app = create_app()
