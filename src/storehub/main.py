"""ASGI entrypoint: `uvicorn src.storehub.main:app`."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.storehub.api.middlewares import setup_middlewares
from src.storehub.api.v1.router import api_router
from src.storehub.authz import DEFAULT_POLICY
from src.storehub.core.config import get_settings
from src.storehub.core.db import dispose_engine, get_session
from src.storehub.core.exceptions import setup_exception_handlers
from src.storehub.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "auth", "description": "Caller identity"},
    {"name": "access", "description": "Authorization decisions for UI guards"},
    {"name": "brands", "description": "Brands and their branches"},
    {"name": "members", "description": "Brand and branch membership management"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("app_starting", app_name=settings.app_name, app_env=settings.app_env)

    uncovered = DEFAULT_POLICY.uncovered_actions()
    if uncovered:
        # Such actions are denied to everyone except platform admins.
        logger.warning("policy_actions_without_roles", actions=sorted(a.value for a in uncovered))

    yield

    await dispose_engine()
    logger.info("app_stopped")


async def health() -> JSONResponse:
    """Report whether the membership database answers."""
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("health_check_failed", exc_info=e)
        return JSONResponse(
            {"status": "unhealthy", "database": "unhealthy"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return JSONResponse({"status": "healthy", "database": "healthy"})


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Brand and branch access control for the ordering platform",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    app.add_api_route("/health", health, methods=["GET"], include_in_schema=False)

    return app


app = create_app()
