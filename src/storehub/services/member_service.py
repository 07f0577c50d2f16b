"""Brand and branch member management."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.storehub.core.logging import get_logger
from src.storehub.models import BranchMember, BranchRole, BrandMember, BrandRole, MemberStatus
from src.storehub.repositories import (
    BranchMemberRepository,
    BranchRepository,
    BrandMemberRepository,
)
from src.storehub.services.exceptions import ConflictError, EmptyUpdateError, NotFoundError

logger = get_logger(__name__)


class MemberService:
    """Membership CRUD. Authorization happens before these methods are called."""

    def __init__(
        self,
        brand_member_repo: BrandMemberRepository,
        branch_member_repo: BranchMemberRepository,
        branch_repo: BranchRepository,
        session: AsyncSession,
    ):
        self.brand_member_repo = brand_member_repo
        self.branch_member_repo = branch_member_repo
        self.branch_repo = branch_repo
        self.session = session

    # Brand members

    async def list_brand_members(self, brand_id: UUID) -> list[BrandMember]:
        return await self.brand_member_repo.list_for_brand(brand_id)

    async def add_brand_member(
        self,
        brand_id: UUID,
        user_id: UUID,
        role: BrandRole = BrandRole.MEMBER,
    ) -> BrandMember:
        """Add an ACTIVE brand member.

        Raises:
            ConflictError: If the user already has a membership in the brand.
        """
        if await self.brand_member_repo.get_member(brand_id, user_id) is not None:
            raise ConflictError("User is already a member of this brand")

        member = self.brand_member_repo.create_member(brand_id, user_id, role=role)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("User is already a member of this brand") from e
        await self.session.refresh(member)

        logger.info("brand_member_added", brand_id=str(brand_id), member_id=str(user_id), role=role.value)
        return member

    async def update_brand_member(
        self,
        brand_id: UUID,
        user_id: UUID,
        role: BrandRole | None = None,
        status: MemberStatus | None = None,
    ) -> BrandMember:
        """Change role and/or status of a brand member.

        Raises:
            EmptyUpdateError: If neither role nor status is given.
            NotFoundError: If the membership does not exist.
        """
        if role is None and status is None:
            raise EmptyUpdateError("Nothing to update")

        member = await self.brand_member_repo.get_member(brand_id, user_id)
        if member is None:
            raise NotFoundError("Member not found")

        if role is not None:
            member.role = role.value
        if status is not None:
            member.status = status.value
        await self.session.commit()
        await self.session.refresh(member)

        logger.info(
            "brand_member_updated",
            brand_id=str(brand_id),
            member_id=str(user_id),
            role=member.role,
            status=member.status,
        )
        return member

    async def remove_brand_member(self, brand_id: UUID, user_id: UUID) -> bool:
        """Delete a brand membership. Returns False if there was none."""
        member = await self.brand_member_repo.get_member(brand_id, user_id)
        if member is None:
            return False
        await self.brand_member_repo.delete(member)
        await self.session.commit()
        logger.info("brand_member_removed", brand_id=str(brand_id), member_id=str(user_id))
        return True

    # Branch members

    async def list_branch_members(self, branch_id: UUID) -> list[BranchMember]:
        return await self.branch_member_repo.list_for_branch(branch_id)

    async def add_branch_member(
        self,
        branch_id: UUID,
        user_id: UUID,
        role: BranchRole = BranchRole.STAFF,
    ) -> BranchMember:
        """Add an ACTIVE branch member.

        Raises:
            NotFoundError: If the branch does not exist.
            ConflictError: If the user already has a membership in the branch.
        """
        if await self.branch_repo.get_by_id(branch_id) is None:
            raise NotFoundError("Branch not found")
        if await self.branch_member_repo.get_member(branch_id, user_id) is not None:
            raise ConflictError("User is already a member of this branch")

        member = self.branch_member_repo.create_member(branch_id, user_id, role=role)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("User is already a member of this branch") from e
        await self.session.refresh(member)

        logger.info(
            "branch_member_added", branch_id=str(branch_id), member_id=str(user_id), role=role.value
        )
        return member

    async def update_branch_member(
        self,
        branch_id: UUID,
        user_id: UUID,
        role: BranchRole | None = None,
        status: MemberStatus | None = None,
    ) -> BranchMember:
        if role is None and status is None:
            raise EmptyUpdateError("Nothing to update")

        member = await self.branch_member_repo.get_member(branch_id, user_id)
        if member is None:
            raise NotFoundError("Member not found")

        if role is not None:
            member.role = role.value
        if status is not None:
            member.status = status.value
        await self.session.commit()
        await self.session.refresh(member)

        logger.info(
            "branch_member_updated",
            branch_id=str(branch_id),
            member_id=str(user_id),
            role=member.role,
            status=member.status,
        )
        return member

    async def remove_branch_member(self, branch_id: UUID, user_id: UUID) -> bool:
        member = await self.branch_member_repo.get_member(branch_id, user_id)
        if member is None:
            return False
        await self.branch_member_repo.delete(member)
        await self.session.commit()
        logger.info("branch_member_removed", branch_id=str(branch_id), member_id=str(user_id))
        return True
