"""SqlMembershipStore and the resolver against PostgreSQL."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.storehub.authz import (
    Action,
    BranchMemberRow,
    BranchResource,
    BranchRow,
    BrandMemberRow,
    DenialReason,
    Denied,
    Granted,
    MembershipStoreError,
    Scope,
    authorize,
)
from src.storehub.models import BranchRole, BrandRole, MemberStatus
from src.storehub.repositories import (
    BranchMemberRepository,
    BranchRepository,
    BrandMemberRepository,
    SqlMembershipStore,
)
from tests.factories import BranchMemberFactory, BrandMemberFactory

pytestmark = pytest.mark.integration


@pytest.fixture
def store(db_session: AsyncSession) -> SqlMembershipStore:
    return SqlMembershipStore(
        BrandMemberRepository(db_session),
        BranchMemberRepository(db_session),
        BranchRepository(db_session),
    )


async def test_reads_brand_membership(store, owner):
    row = await store.get_brand_member(owner.brand_id, owner.user_id)
    assert row == BrandMemberRow(role=BrandRole.OWNER, status=MemberStatus.ACTIVE)


async def test_reads_branch_owner(store, branch):
    assert await store.get_branch(branch.id) == BranchRow(brand_id=branch.brand_id)
    assert await store.get_branch(uuid4()) is None


async def test_reads_branch_membership(store, db_session, branch):
    member = BranchMemberFactory.build(
        branch_id=branch.id, role=BranchRole.VIEWER.value, status=MemberStatus.INVITED.value
    )
    db_session.add(member)
    await db_session.commit()

    row = await store.get_branch_member(branch.id, member.user_id)

    assert row == BranchMemberRow(role=BranchRole.VIEWER, status=MemberStatus.INVITED)


async def test_corrupt_role_is_store_error(store, db_session, brand):
    member = BrandMemberFactory.build(brand_id=brand.id, role="ROOT")
    db_session.add(member)
    await db_session.commit()

    with pytest.raises(MembershipStoreError):
        await store.get_brand_member(brand.id, member.user_id)


async def test_inherited_access_end_to_end(store, db_session, brand, branch):
    manager = BrandMemberFactory.build(brand_id=brand.id, role=BrandRole.MANAGER.value)
    db_session.add(manager)
    await db_session.commit()

    operate = await authorize(
        store, manager.user_id, BranchResource(branch.id), Action.BRANCH_OPERATE
    )
    update = await authorize(store, manager.user_id, BranchResource(branch.id), Action.BRANCH_UPDATE)

    assert operate == Granted(
        scope=Scope.BRANCH, effective_role=BranchRole.STAFF, inherited_from=BrandRole.MANAGER
    )
    assert update == Denied(DenialReason.FORBIDDEN)
