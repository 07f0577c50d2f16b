"""Read capability the resolver needs from membership storage."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from src.storehub.models.enums import BranchRole, BrandRole, MemberStatus


@dataclass(frozen=True)
class BrandMemberRow:
    role: BrandRole
    status: MemberStatus


@dataclass(frozen=True)
class BranchMemberRow:
    role: BranchRole
    status: MemberStatus


@dataclass(frozen=True)
class BranchRow:
    brand_id: UUID


class MembershipStoreError(Exception):
    """The membership store could not answer a lookup."""


class MembershipStore(Protocol):
    """Each lookup returns at most one row, None when absent.

    Implementations raise MembershipStoreError when the backend fails.
    """

    async def get_brand_member(self, brand_id: UUID, user_id: UUID) -> BrandMemberRow | None: ...

    async def get_branch_member(
        self, branch_id: UUID, user_id: UUID
    ) -> BranchMemberRow | None: ...

    async def get_branch(self, branch_id: UUID) -> BranchRow | None: ...
