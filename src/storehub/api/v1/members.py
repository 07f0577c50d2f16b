"""Brand and branch member management endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.storehub.api.dependencies import (
    BranchMemberManageAccess,
    BranchReadAccess,
    BrandMemberManageAccess,
    BrandReadAccess,
    MemberServiceDep,
)
from src.storehub.models import BranchMember, BrandMember
from src.storehub.schemas.member import (
    BranchMemberCreate,
    BranchMemberRead,
    BranchMemberUpdate,
    BrandMemberCreate,
    BrandMemberRead,
    BrandMemberUpdate,
    DeletedResponse,
)
from src.storehub.services import ConflictError, EmptyUpdateError, NotFoundError

router = APIRouter(prefix="/members", tags=["members"])


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, EmptyUpdateError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# Brand members


@router.get("/brand/{brand_id}", response_model=list[BrandMemberRead])
async def list_brand_members(
    brand_id: UUID, access: BrandReadAccess, service: MemberServiceDep
) -> list[BrandMember]:
    return await service.list_brand_members(brand_id)


@router.post(
    "/brand/{brand_id}",
    response_model=BrandMemberRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "User is already a member"}},
)
async def add_brand_member(
    brand_id: UUID,
    request: BrandMemberCreate,
    access: BrandMemberManageAccess,
    service: MemberServiceDep,
) -> BrandMember:
    try:
        return await service.add_brand_member(brand_id, request.user_id, role=request.role)
    except ConflictError as e:
        raise _to_http(e) from e


@router.patch("/brand/{brand_id}/{user_id}", response_model=BrandMemberRead)
async def update_brand_member(
    brand_id: UUID,
    user_id: UUID,
    request: BrandMemberUpdate,
    access: BrandMemberManageAccess,
    service: MemberServiceDep,
) -> BrandMember:
    try:
        return await service.update_brand_member(
            brand_id, user_id, role=request.role, status=request.status
        )
    except (EmptyUpdateError, NotFoundError) as e:
        raise _to_http(e) from e


@router.delete("/brand/{brand_id}/{user_id}", response_model=DeletedResponse)
async def remove_brand_member(
    brand_id: UUID,
    user_id: UUID,
    access: BrandMemberManageAccess,
    service: MemberServiceDep,
) -> DeletedResponse:
    if not await service.remove_brand_member(brand_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return DeletedResponse()


# Branch members


@router.get("/branch/{branch_id}", response_model=list[BranchMemberRead])
async def list_branch_members(
    branch_id: UUID, access: BranchReadAccess, service: MemberServiceDep
) -> list[BranchMember]:
    return await service.list_branch_members(branch_id)


@router.post(
    "/branch/{branch_id}",
    response_model=BranchMemberRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Branch not found"},
        409: {"description": "User is already a member"},
    },
)
async def add_branch_member(
    branch_id: UUID,
    request: BranchMemberCreate,
    access: BranchMemberManageAccess,
    service: MemberServiceDep,
) -> BranchMember:
    try:
        return await service.add_branch_member(branch_id, request.user_id, role=request.role)
    except (ConflictError, NotFoundError) as e:
        raise _to_http(e) from e


@router.patch("/branch/{branch_id}/{user_id}", response_model=BranchMemberRead)
async def update_branch_member(
    branch_id: UUID,
    user_id: UUID,
    request: BranchMemberUpdate,
    access: BranchMemberManageAccess,
    service: MemberServiceDep,
) -> BranchMember:
    try:
        return await service.update_branch_member(
            branch_id, user_id, role=request.role, status=request.status
        )
    except (EmptyUpdateError, NotFoundError) as e:
        raise _to_http(e) from e


@router.delete("/branch/{branch_id}/{user_id}", response_model=DeletedResponse)
async def remove_branch_member(
    branch_id: UUID,
    user_id: UUID,
    access: BranchMemberManageAccess,
    service: MemberServiceDep,
) -> DeletedResponse:
    if not await service.remove_branch_member(branch_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return DeletedResponse()
