"""Membership vocabulary shared by models, authorization and schemas."""

from enum import Enum


class BrandRole(str, Enum):
    """User role within a brand."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


class BranchRole(str, Enum):
    """User role within a single branch."""

    BRANCH_OWNER = "BRANCH_OWNER"
    BRANCH_ADMIN = "BRANCH_ADMIN"
    STAFF = "STAFF"
    VIEWER = "VIEWER"


class MemberStatus(str, Enum):
    """Lifecycle status of a brand or branch membership."""

    INVITED = "INVITED"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    LEFT = "LEFT"


def is_active(status: MemberStatus | str) -> bool:
    """Whether a membership with this status can be used for authorization."""
    return status == MemberStatus.ACTIVE
