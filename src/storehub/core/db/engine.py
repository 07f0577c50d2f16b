"""Async engine for the membership database."""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.storehub.core.config import Settings, get_settings

_engine: AsyncEngine | None = None


def ssl_context_for(mode: str) -> ssl.SSLContext | None:
    """asyncpg SSL context for a libpq-style sslmode. None means plain TCP.

    prefer/require encrypt without verifying; verify-ca checks the chain,
    verify-full also checks the hostname.
    """
    if mode == "disable":
        return None

    context = ssl.create_default_context()
    if mode in ("verify-ca", "verify-full"):
        context.check_hostname = mode == "verify-full"
        context.verify_mode = ssl.CERT_REQUIRED
    else:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def build_engine(settings: Settings) -> AsyncEngine:
    connect_args: dict[str, Any] = {}
    context = ssl_context_for(settings.database_ssl_mode)
    if context is not None:
        connect_args["ssl"] = context

    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def get_engine() -> AsyncEngine:
    """Process-wide engine, created on first use."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


async def dispose_engine() -> None:
    """Close pooled connections. The next get_engine() call starts a new pool."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
