"""Hubtrack API application.

``create_app`` assembles the FastAPI instance; the module-level ``app`` is
what uvicorn serves. All resources sit under ``/api``, only the discovery
document is served from ``/``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hubtrack.presentation.api.dependencies import get_engine
from hubtrack.presentation.api.exception_handlers import setup_exception_handlers
from hubtrack.presentation.api.routers import auth_router, users_router
from hubtrack.presentation.api.schemas import HealthResponse
from hubtrack_config.settings import Settings, get_settings
from hubtrack_identity.infrastructure.persistence.sqlalchemy import IdentityBase

API_VERSION = "1.0.0"
API_PREFIX = "/api"

_OWN_LOGGERS = ("hubtrack", "hubtrack_identity", "hubtrack_config")
_CHATTY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "httpx", "httpcore")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send log records to stdout, once per process.

    Hubtrack loggers follow ``LOG_LEVEL``; database and HTTP client
    libraries are held at WARNING.
    """
    level = logging.getLevelName(get_settings().log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _OWN_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Accounts and sessions.

Register or log in to get a bearer token (7 days by default) and send it as
`Authorization: Bearer <token>`. Refresh it before it runs out.

Tokens are stateless: logging out does not revoke them. Reset links are
emailed and stay valid for one hour.
""",
    },
    {
        "name": "Users",
        "description": "Team listing for admins and managers, deactivation for admins.",
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Discovery document."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Create missing tables on startup, release the pool on shutdown."""
    engine = get_engine()
    logger.info("Starting Hubtrack API %s", API_VERSION)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(IdentityBase.metadata.create_all)
    except OSError:
        logger.critical("Database unreachable, refusing to start")
        raise SystemExit(1) from None
    logger.info("Database schema ready")

    yield

    await engine.dispose()
    logger.info("Hubtrack API stopped, database pool disposed")


def create_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    router.include_router(users_router, prefix="/users", tags=["Users"])

    @router.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION)

    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Hubtrack FastAPI application.

    Parameters
    ----------
    settings
        Settings to build from; defaults to ``get_settings()``. Tests pass
        their own instance.

    Returns
    -------
    The configured application. The interactive docs are only served
    when ``api_debug`` is on.
    """
    _configure_logging()
    settings = settings or get_settings()

    docs = "/docs" if settings.api_debug else None
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Accounts and authentication for the **Hubtrack** time tracker.",
        version=API_VERSION,
        docs_url=docs,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_api_router(), prefix=API_PREFIX)

    discovery = {
        "name": f"{settings.app_name} API",
        "version": API_VERSION,
        "docs": docs,
        "api_base": API_PREFIX,
        "endpoints": {
            resource: f"{API_PREFIX}/{resource}"
            for resource in ("health", "auth", "users")
        },
    }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        return discovery

    return app


app = create_app()
