"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.storehub.core.config import get_settings
from src.storehub.core.logging import bind_user_context
from src.storehub.core.security import Principal, decode_token, principal_from_claims


async def get_current_principal(
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Validate the bearer access token and return the caller.

    Users are owned by the auth provider; a valid signature and a UUID
    subject are all that is checked here. Brand/branch access is decided
    separately by `require_action`.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    payload = decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    principal = principal_from_claims(payload, get_settings())
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    bind_user_context(principal.user_id, principal.email)
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
