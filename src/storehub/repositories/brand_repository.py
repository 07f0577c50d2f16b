"""Repositories for Brand and Branch entities."""

from uuid import UUID

from sqlmodel import select

from src.storehub.models import Branch, Brand, BrandMember, MemberStatus
from src.storehub.repositories.base import BaseRepository


class BrandRepository(BaseRepository[Brand]):
    model = Brand

    async def exists_by_slug(self, slug: str) -> bool:
        result = await self.session.execute(select(Brand.id).where(Brand.slug == slug))
        return result.first() is not None

    async def list_for_member(self, user_id: UUID) -> list[Brand]:
        """Brands where the user holds an ACTIVE brand membership."""
        result = await self.session.execute(
            select(Brand)
            .join(BrandMember, BrandMember.brand_id == Brand.id)  # type: ignore[arg-type]
            .where(
                BrandMember.user_id == user_id,
                BrandMember.status == MemberStatus.ACTIVE.value,
            )
            .order_by(Brand.created_at)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())


class BranchRepository(BaseRepository[Branch]):
    model = Branch

    async def get_brand_id(self, branch_id: UUID) -> UUID | None:
        """Owning brand of a branch, None if the branch does not exist."""
        result = await self.session.execute(select(Branch.brand_id).where(Branch.id == branch_id))
        return result.scalar_one_or_none()

    async def exists_by_slug(self, brand_id: UUID, slug: str) -> bool:
        result = await self.session.execute(
            select(Branch.id).where(Branch.brand_id == brand_id, Branch.slug == slug)
        )
        return result.first() is not None

    async def list_for_brand(self, brand_id: UUID) -> list[Branch]:
        result = await self.session.execute(
            select(Branch).where(Branch.brand_id == brand_id).order_by(Branch.created_at)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())
