"""Brand-to-branch role inheritance."""

from collections.abc import Mapping
from types import MappingProxyType

from src.storehub.models.enums import BranchRole, BrandRole

BRAND_TO_BRANCH_ROLE: Mapping[BrandRole, BranchRole | None] = MappingProxyType(
    {
        BrandRole.OWNER: BranchRole.BRANCH_ADMIN,
        BrandRole.ADMIN: BranchRole.BRANCH_ADMIN,
        BrandRole.MANAGER: BranchRole.STAFF,
        BrandRole.MEMBER: None,
    }
)


def brand_to_effective_branch_role(brand_role: BrandRole) -> BranchRole | None:
    """Branch role a brand member acts as at a branch they hold no membership in.

    None means the brand role carries no branch-scoped authority.
    """
    return BRAND_TO_BRANCH_ROLE.get(brand_role)
