"""Action catalog, partitioned by the scope each action applies to."""

from enum import Enum


class Scope(str, Enum):
    """Level at which an action or membership applies."""

    BRAND = "brand"
    BRANCH = "branch"


class Action(str, Enum):
    BRAND_READ = "brand:read"
    BRAND_UPDATE = "brand:update"
    BRAND_BRANCH_CREATE = "brand:branch_create"
    BRAND_MEMBER_MANAGE = "brand:member_manage"

    BRANCH_READ = "branch:read"
    BRANCH_UPDATE = "branch:update"
    BRANCH_MEMBER_MANAGE = "branch:member_manage"
    BRANCH_OPERATE = "branch:operate"  # day-to-day operations, e.g. processing orders

    @property
    def scope(self) -> Scope | None:
        return scope_of(self)


BRAND_ACTIONS: frozenset[Action] = frozenset(
    {
        Action.BRAND_READ,
        Action.BRAND_UPDATE,
        Action.BRAND_BRANCH_CREATE,
        Action.BRAND_MEMBER_MANAGE,
    }
)

BRANCH_ACTIONS: frozenset[Action] = frozenset(
    {
        Action.BRANCH_READ,
        Action.BRANCH_UPDATE,
        Action.BRANCH_MEMBER_MANAGE,
        Action.BRANCH_OPERATE,
    }
)


def parse_action(value: Action | str) -> Action | None:
    """Return the catalog action for a raw value, or None if it is not declared."""
    try:
        return Action(value)
    except ValueError:
        return None


def scope_of(action: Action | str) -> Scope | None:
    """Classify an action by the scope it requires.

    Returns None for values outside both catalog sets.
    """
    parsed = parse_action(action)
    if parsed in BRAND_ACTIONS:
        return Scope.BRAND
    if parsed in BRANCH_ACTIONS:
        return Scope.BRANCH
    return None
