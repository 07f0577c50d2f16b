"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.storehub.api.dependencies.db import DBSession
from src.storehub.api.dependencies.repositories import (
    BranchMemberRepo,
    BranchRepo,
    BrandMemberRepo,
    BrandRepo,
)
from src.storehub.authz import MembershipStore
from src.storehub.repositories import SqlMembershipStore
from src.storehub.services import BrandService, MemberService


def get_membership_store(
    brand_member_repo: BrandMemberRepo,
    branch_member_repo: BranchMemberRepo,
    branch_repo: BranchRepo,
) -> MembershipStore:
    """Membership reads for the authorization resolver."""
    return SqlMembershipStore(brand_member_repo, branch_member_repo, branch_repo)


def get_member_service(
    brand_member_repo: BrandMemberRepo,
    branch_member_repo: BranchMemberRepo,
    branch_repo: BranchRepo,
    session: DBSession,
) -> MemberService:
    return MemberService(brand_member_repo, branch_member_repo, branch_repo, session)


def get_brand_service(
    brand_repo: BrandRepo,
    branch_repo: BranchRepo,
    brand_member_repo: BrandMemberRepo,
    session: DBSession,
) -> BrandService:
    return BrandService(brand_repo, branch_repo, brand_member_repo, session)


MembershipStoreDep = Annotated[MembershipStore, Depends(get_membership_store)]
MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]
BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
