"""Test doubles and data helpers shared across tests."""

from uuid import UUID, uuid4

from src.storehub.authz import (
    BranchMemberRow,
    BranchRow,
    BrandMemberRow,
    MembershipStoreError,
)
from src.storehub.models import BranchRole, BrandRole, MemberStatus


class InMemoryMembershipStore:
    """MembershipStore backed by dicts.

    Records every lookup in `calls` as (table, key) and can be told to fail
    for a table via `fail_on`.
    """

    def __init__(self) -> None:
        self.brand_members: dict[tuple[UUID, UUID], BrandMemberRow] = {}
        self.branch_members: dict[tuple[UUID, UUID], BranchMemberRow] = {}
        self.branches: dict[UUID, BranchRow] = {}
        self.calls: list[tuple[str, tuple[UUID, ...]]] = []
        self.fail_on: dict[str, BaseException] = {}

    def add_brand_member(
        self,
        brand_id: UUID,
        user_id: UUID,
        role: BrandRole,
        status: MemberStatus = MemberStatus.ACTIVE,
    ) -> None:
        self.brand_members[(brand_id, user_id)] = BrandMemberRow(role=role, status=status)

    def add_branch_member(
        self,
        branch_id: UUID,
        user_id: UUID,
        role: BranchRole,
        status: MemberStatus = MemberStatus.ACTIVE,
    ) -> None:
        self.branch_members[(branch_id, user_id)] = BranchMemberRow(role=role, status=status)

    def add_branch(self, brand_id: UUID, branch_id: UUID | None = None) -> UUID:
        branch_id = branch_id or uuid4()
        self.branches[branch_id] = BranchRow(brand_id=brand_id)
        return branch_id

    def _record(self, table: str, *key: UUID) -> None:
        self.calls.append((table, key))
        if table in self.fail_on:
            raise self.fail_on[table]

    async def get_brand_member(self, brand_id: UUID, user_id: UUID) -> BrandMemberRow | None:
        self._record("brand_members", brand_id, user_id)
        return self.brand_members.get((brand_id, user_id))

    async def get_branch_member(self, branch_id: UUID, user_id: UUID) -> BranchMemberRow | None:
        self._record("branch_members", branch_id, user_id)
        return self.branch_members.get((branch_id, user_id))

    async def get_branch(self, branch_id: UUID) -> BranchRow | None:
        self._record("branches", branch_id)
        return self.branches.get(branch_id)

    def tables_queried(self) -> list[str]:
        return [table for table, _ in self.calls]


def failing_store(table: str, error: BaseException | None = None) -> InMemoryMembershipStore:
    """Store whose lookups against `table` raise."""
    store = InMemoryMembershipStore()
    store.fail_on[table] = error or MembershipStoreError(f"{table} unavailable")
    return store
