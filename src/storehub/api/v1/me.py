"""Caller identity endpoint."""

from fastapi import APIRouter

from src.storehub.api.dependencies import CurrentPrincipal
from src.storehub.schemas.auth import MeResponse, PrincipalRead

router = APIRouter(tags=["auth"])


@router.get("/me", response_model=MeResponse)
async def read_me(principal: CurrentPrincipal) -> MeResponse:
    """Return the authenticated caller and whether they are a platform admin."""
    return MeResponse(
        user=PrincipalRead(
            id=principal.user_id,
            email=principal.email,
            is_admin=principal.is_admin,
        )
    )
