"""SQL-backed MembershipStore for the authorization resolver."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.storehub.authz.store import (
    BranchMemberRow,
    BranchRow,
    BrandMemberRow,
    MembershipStoreError,
)
from src.storehub.repositories.brand_repository import BranchRepository
from src.storehub.repositories.membership_repository import (
    BranchMemberRepository,
    BrandMemberRepository,
)


class SqlMembershipStore:
    """Adapts the membership repositories to the resolver's three reads.

    Database failures and rows holding unknown role/status values are
    reported as MembershipStoreError.
    """

    def __init__(
        self,
        brand_members: BrandMemberRepository,
        branch_members: BranchMemberRepository,
        branches: BranchRepository,
    ):
        self.brand_members = brand_members
        self.branch_members = branch_members
        self.branches = branches

    async def get_brand_member(self, brand_id: UUID, user_id: UUID) -> BrandMemberRow | None:
        try:
            member = await self.brand_members.get_member(brand_id, user_id)
            if member is None:
                return None
            return BrandMemberRow(role=member.role_enum, status=member.status_enum)
        except (SQLAlchemyError, ValueError) as e:
            raise MembershipStoreError(f"brand_members lookup failed: {e}") from e

    async def get_branch_member(self, branch_id: UUID, user_id: UUID) -> BranchMemberRow | None:
        try:
            member = await self.branch_members.get_member(branch_id, user_id)
            if member is None:
                return None
            return BranchMemberRow(role=member.role_enum, status=member.status_enum)
        except (SQLAlchemyError, ValueError) as e:
            raise MembershipStoreError(f"branch_members lookup failed: {e}") from e

    async def get_branch(self, branch_id: UUID) -> BranchRow | None:
        try:
            brand_id = await self.branches.get_brand_id(branch_id)
        except SQLAlchemyError as e:
            raise MembershipStoreError(f"branches lookup failed: {e}") from e
        if brand_id is None:
            return None
        return BranchRow(brand_id=brand_id)
