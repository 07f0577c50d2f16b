"""Brand and branch endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.storehub.api.dependencies import (
    BranchCreateAccess,
    BranchReadAccess,
    BranchUpdateAccess,
    BrandReadAccess,
    BrandServiceDep,
    BrandUpdateAccess,
    CurrentPrincipal,
)
from src.storehub.models import Branch, Brand
from src.storehub.schemas.brand import (
    BranchCreate,
    BranchRead,
    BranchUpdate,
    BrandCreate,
    BrandRead,
    BrandUpdate,
)
from src.storehub.services import ConflictError, EmptyUpdateError, NotFoundError

router = APIRouter(tags=["brands"])


@router.post(
    "/brands",
    response_model=BrandRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Brand slug already exists"}},
)
async def create_brand(
    request: BrandCreate,
    principal: CurrentPrincipal,
    service: BrandServiceDep,
) -> Brand:
    """Create a brand. The caller becomes its owner."""
    try:
        return await service.create_brand(request.name, request.slug, principal.user_id)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get("/brands", response_model=list[BrandRead])
async def list_my_brands(principal: CurrentPrincipal, service: BrandServiceDep) -> list[Brand]:
    """Brands where the caller has an active membership."""
    return await service.list_user_brands(principal.user_id)


@router.get("/brands/{brand_id}", response_model=BrandRead)
async def get_brand(brand_id: UUID, access: BrandReadAccess, service: BrandServiceDep) -> Brand:
    try:
        return await service.get_brand(brand_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch("/brands/{brand_id}", response_model=BrandRead)
async def update_brand(
    brand_id: UUID,
    request: BrandUpdate,
    access: BrandUpdateAccess,
    service: BrandServiceDep,
) -> Brand:
    try:
        return await service.update_brand(brand_id, name=request.name)
    except EmptyUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/brands/{brand_id}/branches", response_model=list[BranchRead])
async def list_branches(
    brand_id: UUID, access: BrandReadAccess, service: BrandServiceDep
) -> list[Branch]:
    return await service.list_branches(brand_id)


@router.post(
    "/brands/{brand_id}/branches",
    response_model=BranchRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Branch slug already exists in this brand"}},
)
async def create_branch(
    brand_id: UUID,
    request: BranchCreate,
    access: BranchCreateAccess,
    service: BrandServiceDep,
) -> Branch:
    try:
        return await service.create_branch(brand_id, request.name, request.slug)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get("/branches/{branch_id}", response_model=BranchRead)
async def get_branch(
    branch_id: UUID, access: BranchReadAccess, service: BrandServiceDep
) -> Branch:
    try:
        return await service.get_branch(branch_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch("/branches/{branch_id}", response_model=BranchRead)
async def update_branch(
    branch_id: UUID,
    request: BranchUpdate,
    access: BranchUpdateAccess,
    service: BrandServiceDep,
) -> Branch:
    try:
        return await service.update_branch(branch_id, name=request.name)
    except EmptyUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
