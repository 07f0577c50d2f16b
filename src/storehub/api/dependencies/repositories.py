"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.storehub.api.dependencies.db import DBSession
from src.storehub.repositories import (
    BranchMemberRepository,
    BranchRepository,
    BrandMemberRepository,
    BrandRepository,
)


def get_brand_repository(session: DBSession) -> BrandRepository:
    return BrandRepository(session)


def get_branch_repository(session: DBSession) -> BranchRepository:
    return BranchRepository(session)


def get_brand_member_repository(session: DBSession) -> BrandMemberRepository:
    return BrandMemberRepository(session)


def get_branch_member_repository(session: DBSession) -> BranchMemberRepository:
    return BranchMemberRepository(session)


BrandRepo = Annotated[BrandRepository, Depends(get_brand_repository)]
BranchRepo = Annotated[BranchRepository, Depends(get_branch_repository)]
BrandMemberRepo = Annotated[BrandMemberRepository, Depends(get_brand_member_repository)]
BranchMemberRepo = Annotated[BranchMemberRepository, Depends(get_branch_member_repository)]
