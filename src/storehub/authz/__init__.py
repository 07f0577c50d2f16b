"""Brand/branch authorization.

Public entry point is `authorize`; everything else describes its inputs
(actions, resources, policy) and outputs (decisions).
"""

from src.storehub.authz.actions import (
    BRANCH_ACTIONS,
    BRAND_ACTIONS,
    Action,
    Scope,
    parse_action,
    scope_of,
)
from src.storehub.authz.decision import (
    BranchResource,
    BrandResource,
    Decision,
    DenialReason,
    Denied,
    Granted,
    Resource,
)
from src.storehub.authz.inheritance import BRAND_TO_BRANCH_ROLE, brand_to_effective_branch_role
from src.storehub.authz.policy import (
    BRANCH_POLICY,
    BRAND_POLICY,
    DEFAULT_POLICY,
    Policy,
    can_modify_order,
    can_modify_product_or_inventory,
)
from src.storehub.authz.resolver import authorize, normalize_id, resource_for
from src.storehub.authz.store import (
    BranchMemberRow,
    BranchRow,
    BrandMemberRow,
    MembershipStore,
    MembershipStoreError,
)

__all__ = [
    # Actions
    "BRANCH_ACTIONS",
    "BRAND_ACTIONS",
    "Action",
    "Scope",
    "parse_action",
    "scope_of",
    # Policy
    "BRANCH_POLICY",
    "BRAND_POLICY",
    "BRAND_TO_BRANCH_ROLE",
    "DEFAULT_POLICY",
    "Policy",
    "brand_to_effective_branch_role",
    "can_modify_order",
    "can_modify_product_or_inventory",
    # Decisions
    "BranchResource",
    "BrandResource",
    "Decision",
    "DenialReason",
    "Denied",
    "Granted",
    "Resource",
    # Store
    "BranchMemberRow",
    "BranchRow",
    "BrandMemberRow",
    "MembershipStore",
    "MembershipStoreError",
    # Resolver
    "authorize",
    "normalize_id",
    "resource_for",
]
