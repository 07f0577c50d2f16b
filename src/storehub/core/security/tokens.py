"""HS256 access tokens in the hosted auth provider's format."""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from src.storehub.core.config import get_settings


def create_access_token(
    subject: str | UUID,
    email: str | None = None,
    app_metadata: dict[str, Any] | None = None,
    user_metadata: dict[str, Any] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a token the way the provider does.

    Only tests and local tooling mint tokens; real callers bring their own.
    """
    settings = get_settings()
    issued_at = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)

    claims: dict[str, Any] = {
        "sub": str(subject),
        "iat": issued_at,
        "exp": issued_at + lifetime,
        "app_metadata": app_metadata or {},
        "user_metadata": user_metadata or {},
    }
    if email:
        claims["email"] = email
    if settings.jwt_audience:
        claims["aud"] = settings.jwt_audience

    token: str = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return token


def decode_token(token: str) -> dict[str, Any] | None:
    """Verified claims, or None when the signature, expiry or audience is wrong."""
    settings = get_settings()
    audience = settings.jwt_audience
    try:
        claims: dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=audience,
            options={"verify_aud": audience is not None},
        )
    except JWTError:
        return None
    return claims
