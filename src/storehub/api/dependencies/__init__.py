"""FastAPI dependency injection definitions."""

# Auth
from src.storehub.api.dependencies.auth import CurrentPrincipal, get_current_principal

# Access guards
from src.storehub.api.dependencies.authz import (
    DENIAL_STATUS,
    AccessContext,
    BranchCreateAccess,
    BranchMemberManageAccess,
    BranchOperateAccess,
    BranchReadAccess,
    BranchUpdateAccess,
    BrandMemberManageAccess,
    BrandReadAccess,
    BrandUpdateAccess,
    denial_exception,
    evaluate,
    extract_scope_ids,
    normalize_id,
    require_action,
)

# Database
from src.storehub.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.storehub.api.dependencies.repositories import (
    BranchMemberRepo,
    BranchRepo,
    BrandMemberRepo,
    BrandRepo,
    get_branch_member_repository,
    get_branch_repository,
    get_brand_member_repository,
    get_brand_repository,
)

# Services
from src.storehub.api.dependencies.services import (
    BrandServiceDep,
    MemberServiceDep,
    MembershipStoreDep,
    get_brand_service,
    get_member_service,
    get_membership_store,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentPrincipal",
    "get_current_principal",
    # Access guards
    "DENIAL_STATUS",
    "AccessContext",
    "BranchCreateAccess",
    "BranchMemberManageAccess",
    "BranchOperateAccess",
    "BranchReadAccess",
    "BranchUpdateAccess",
    "BrandMemberManageAccess",
    "BrandReadAccess",
    "BrandUpdateAccess",
    "denial_exception",
    "evaluate",
    "extract_scope_ids",
    "normalize_id",
    "require_action",
    # Repositories
    "BranchMemberRepo",
    "BranchRepo",
    "BrandMemberRepo",
    "BrandRepo",
    "get_branch_member_repository",
    "get_branch_repository",
    "get_brand_member_repository",
    "get_brand_repository",
    # Services
    "BrandServiceDep",
    "MemberServiceDep",
    "MembershipStoreDep",
    "get_brand_service",
    "get_member_service",
    "get_membership_store",
]
