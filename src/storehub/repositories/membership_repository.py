"""Repositories for brand and branch memberships."""

from uuid import UUID

from sqlmodel import select

from src.storehub.models import BranchMember, BranchRole, BrandMember, BrandRole, MemberStatus
from src.storehub.repositories.base import BaseRepository


class BrandMemberRepository(BaseRepository[BrandMember]):
    model = BrandMember

    async def get_member(self, brand_id: UUID, user_id: UUID) -> BrandMember | None:
        """Get the membership for a user in a brand, whatever its status."""
        result = await self.session.execute(
            select(BrandMember).where(
                BrandMember.brand_id == brand_id,
                BrandMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_brand(self, brand_id: UUID) -> list[BrandMember]:
        result = await self.session.execute(
            select(BrandMember)
            .where(BrandMember.brand_id == brand_id)
            .order_by(BrandMember.created_at)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    def create_member(
        self,
        brand_id: UUID,
        user_id: UUID,
        role: BrandRole = BrandRole.MEMBER,
        status: MemberStatus = MemberStatus.ACTIVE,
    ) -> BrandMember:
        """Create a new membership (add to session, no commit)."""
        member = BrandMember(
            brand_id=brand_id,
            user_id=user_id,
            role=role.value,
            status=status.value,
        )
        self.session.add(member)
        return member


class BranchMemberRepository(BaseRepository[BranchMember]):
    model = BranchMember

    async def get_member(self, branch_id: UUID, user_id: UUID) -> BranchMember | None:
        """Get the membership for a user in a branch, whatever its status."""
        result = await self.session.execute(
            select(BranchMember).where(
                BranchMember.branch_id == branch_id,
                BranchMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_branch(self, branch_id: UUID) -> list[BranchMember]:
        result = await self.session.execute(
            select(BranchMember)
            .where(BranchMember.branch_id == branch_id)
            .order_by(BranchMember.created_at)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    def create_member(
        self,
        branch_id: UUID,
        user_id: UUID,
        role: BranchRole = BranchRole.STAFF,
        status: MemberStatus = MemberStatus.ACTIVE,
    ) -> BranchMember:
        """Create a new membership (add to session, no commit)."""
        member = BranchMember(
            branch_id=branch_id,
            user_id=user_id,
            role=role.value,
            status=status.value,
        )
        self.session.add(member)
        return member
