from src.storehub.schemas.access import AuthorizeRequest, DecisionRead
from src.storehub.schemas.auth import MeResponse, PrincipalRead
from src.storehub.schemas.brand import (
    BranchCreate,
    BranchRead,
    BranchUpdate,
    BrandCreate,
    BrandRead,
    BrandUpdate,
)
from src.storehub.schemas.member import (
    BranchMemberCreate,
    BranchMemberRead,
    BranchMemberUpdate,
    BrandMemberCreate,
    BrandMemberRead,
    BrandMemberUpdate,
    DeletedResponse,
)

__all__ = [
    # Access
    "AuthorizeRequest",
    "DecisionRead",
    # Auth
    "MeResponse",
    "PrincipalRead",
    # Brand
    "BranchCreate",
    "BranchRead",
    "BranchUpdate",
    "BrandCreate",
    "BrandRead",
    "BrandUpdate",
    # Member
    "BranchMemberCreate",
    "BranchMemberRead",
    "BranchMemberUpdate",
    "BrandMemberCreate",
    "BrandMemberRead",
    "BrandMemberUpdate",
    "DeletedResponse",
]
