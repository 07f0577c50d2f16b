"""Static role policy for brand and branch actions."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.storehub.authz.actions import BRAND_ACTIONS, BRANCH_ACTIONS, Action
from src.storehub.models.enums import BranchRole, BrandRole

BRAND_POLICY: Mapping[Action, frozenset[BrandRole]] = MappingProxyType(
    {
        Action.BRAND_READ: frozenset(
            {BrandRole.OWNER, BrandRole.ADMIN, BrandRole.MANAGER, BrandRole.MEMBER}
        ),
        Action.BRAND_UPDATE: frozenset({BrandRole.OWNER, BrandRole.ADMIN}),
        Action.BRAND_BRANCH_CREATE: frozenset({BrandRole.OWNER, BrandRole.ADMIN}),
        Action.BRAND_MEMBER_MANAGE: frozenset({BrandRole.OWNER, BrandRole.ADMIN}),
    }
)

BRANCH_POLICY: Mapping[Action, frozenset[BranchRole]] = MappingProxyType(
    {
        Action.BRANCH_READ: frozenset(
            {
                BranchRole.BRANCH_OWNER,
                BranchRole.BRANCH_ADMIN,
                BranchRole.STAFF,
                BranchRole.VIEWER,
            }
        ),
        Action.BRANCH_UPDATE: frozenset({BranchRole.BRANCH_OWNER, BranchRole.BRANCH_ADMIN}),
        Action.BRANCH_MEMBER_MANAGE: frozenset(
            {BranchRole.BRANCH_OWNER, BranchRole.BRANCH_ADMIN}
        ),
        Action.BRANCH_OPERATE: frozenset(
            {BranchRole.BRANCH_OWNER, BranchRole.BRANCH_ADMIN, BranchRole.STAFF}
        ),
    }
)


@dataclass(frozen=True)
class Policy:
    """Role tables consulted by the resolver.

    Lookups for actions without an entry return an empty set, so a gap in
    a table denies instead of allowing.
    """

    brand: Mapping[Action, frozenset[BrandRole]]
    branch: Mapping[Action, frozenset[BranchRole]]

    def brand_roles(self, action: Action) -> frozenset[BrandRole]:
        return self.brand.get(action, frozenset())

    def branch_roles(self, action: Action) -> frozenset[BranchRole]:
        return self.branch.get(action, frozenset())

    def uncovered_actions(self) -> frozenset[Action]:
        """Catalog actions with no authorized role in this policy."""
        missing = {a for a in BRAND_ACTIONS if not self.brand_roles(a)}
        missing |= {a for a in BRANCH_ACTIONS if not self.branch_roles(a)}
        return frozenset(missing)


DEFAULT_POLICY = Policy(brand=BRAND_POLICY, branch=BRANCH_POLICY)


# Write permissions on catalog and order screens, keyed by effective role.
PRODUCT_INVENTORY_WRITE_ROLES: frozenset[str] = frozenset(
    {
        BrandRole.OWNER.value,
        BrandRole.ADMIN.value,
        BranchRole.BRANCH_OWNER.value,
        BranchRole.BRANCH_ADMIN.value,
    }
)

ORDER_WRITE_ROLES: frozenset[str] = PRODUCT_INVENTORY_WRITE_ROLES | {BranchRole.STAFF.value}


def _role_value(role: BrandRole | BranchRole | str | None) -> str:
    if isinstance(role, BrandRole | BranchRole):
        return role.value
    return role or ""


def can_modify_product_or_inventory(role: BrandRole | BranchRole | str | None) -> bool:
    return _role_value(role) in PRODUCT_INVENTORY_WRITE_ROLES


def can_modify_order(role: BrandRole | BranchRole | str | None) -> bool:
    return _role_value(role) in ORDER_WRITE_ROLES
