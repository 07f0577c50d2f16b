"""Brand and branch registry service."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.storehub.core.logging import get_logger
from src.storehub.models import Branch, Brand, BrandRole
from src.storehub.repositories import BranchRepository, BrandMemberRepository, BrandRepository
from src.storehub.services.exceptions import ConflictError, EmptyUpdateError, NotFoundError

logger = get_logger(__name__)


class BrandService:
    def __init__(
        self,
        brand_repo: BrandRepository,
        branch_repo: BranchRepository,
        brand_member_repo: BrandMemberRepository,
        session: AsyncSession,
    ):
        self.brand_repo = brand_repo
        self.branch_repo = branch_repo
        self.brand_member_repo = brand_member_repo
        self.session = session

    async def create_brand(self, name: str, slug: str, owner_id: UUID) -> Brand:
        """Create a brand and make its creator the ACTIVE owner.

        Raises:
            ConflictError: If the slug is taken.
        """
        if await self.brand_repo.exists_by_slug(slug):
            raise ConflictError(f"Brand with slug '{slug}' already exists")

        brand = Brand(name=name, slug=slug)
        self.brand_repo.add(brand)
        try:
            # Flush so the owner membership can reference the brand row.
            await self.session.flush()
            self.brand_member_repo.create_member(brand.id, owner_id, role=BrandRole.OWNER)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"Brand with slug '{slug}' already exists") from e
        await self.session.refresh(brand)

        logger.info("brand_created", brand_id=str(brand.id), slug=slug)
        return brand

    async def get_brand(self, brand_id: UUID) -> Brand:
        brand = await self.brand_repo.get_by_id(brand_id)
        if brand is None:
            raise NotFoundError("Brand not found")
        return brand

    async def list_user_brands(self, user_id: UUID) -> list[Brand]:
        return await self.brand_repo.list_for_member(user_id)

    async def update_brand(self, brand_id: UUID, name: str | None = None) -> Brand:
        if name is None:
            raise EmptyUpdateError("Nothing to update")
        brand = await self.get_brand(brand_id)
        brand.name = name
        await self.session.commit()
        await self.session.refresh(brand)
        return brand

    async def create_branch(self, brand_id: UUID, name: str, slug: str) -> Branch:
        """Create a branch under a brand.

        Raises:
            NotFoundError: If the brand does not exist.
            ConflictError: If the brand already has a branch with this slug.
        """
        await self.get_brand(brand_id)
        if await self.branch_repo.exists_by_slug(brand_id, slug):
            raise ConflictError(f"Branch with slug '{slug}' already exists in this brand")

        branch = Branch(brand_id=brand_id, name=name, slug=slug)
        self.branch_repo.add(branch)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"Branch with slug '{slug}' already exists in this brand") from e
        await self.session.refresh(branch)

        logger.info("branch_created", brand_id=str(brand_id), branch_id=str(branch.id), slug=slug)
        return branch

    async def get_branch(self, branch_id: UUID) -> Branch:
        branch = await self.branch_repo.get_by_id(branch_id)
        if branch is None:
            raise NotFoundError("Branch not found")
        return branch

    async def list_branches(self, brand_id: UUID) -> list[Branch]:
        return await self.branch_repo.list_for_brand(brand_id)

    async def update_branch(self, branch_id: UUID, name: str | None = None) -> Branch:
        if name is None:
            raise EmptyUpdateError("Nothing to update")
        branch = await self.get_branch(branch_id)
        branch.name = name
        await self.session.commit()
        await self.session.refresh(branch)
        return branch
