"""Brand, branch and member routes running against PostgreSQL."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


async def test_brand_lifecycle(db_client: AsyncClient, auth_headers, user_id):
    headers = auth_headers(user_id)

    created = await db_client.post(
        "/api/v1/brands", json={"name": "Kimbap House", "slug": "kimbap-house"}, headers=headers
    )
    assert created.status_code == 201
    brand_id = created.json()["id"]

    duplicate = await db_client.post(
        "/api/v1/brands", json={"name": "Other", "slug": "kimbap-house"}, headers=headers
    )
    assert duplicate.status_code == 409

    mine = await db_client.get("/api/v1/brands", headers=headers)
    assert [b["id"] for b in mine.json()] == [brand_id]

    branch = await db_client.post(
        f"/api/v1/brands/{brand_id}/branches",
        json={"name": "Gangnam", "slug": "gangnam"},
        headers=headers,
    )
    assert branch.status_code == 201
    branch_id = branch.json()["id"]

    # Creator owns the brand and reaches the branch through inheritance.
    probe = await db_client.post(
        "/api/v1/authorize",
        json={"action": "branch:member_manage", "branch_id": branch_id},
        headers=headers,
    )
    assert probe.json() == {"ok": True, "scope": "branch", "effective_role": "BRANCH_ADMIN"}


async def test_member_management(db_client: AsyncClient, auth_headers, owner, branch):
    headers = auth_headers(owner.user_id)
    staff_id = uuid4()

    added = await db_client.post(
        f"/api/v1/members/branch/{branch.id}", json={"user_id": str(staff_id)}, headers=headers
    )
    assert added.status_code == 201
    assert added.json()["role"] == "STAFF"

    again = await db_client.post(
        f"/api/v1/members/branch/{branch.id}", json={"user_id": str(staff_id)}, headers=headers
    )
    assert again.status_code == 409

    staff_headers = auth_headers(staff_id)
    operate = await db_client.post(
        "/api/v1/authorize",
        json={"action": "branch:operate", "branch_id": str(branch.id)},
        headers=staff_headers,
    )
    assert operate.json()["ok"] is True

    suspended = await db_client.patch(
        f"/api/v1/members/branch/{branch.id}/{staff_id}",
        json={"status": "SUSPENDED"},
        headers=headers,
    )
    assert suspended.json()["status"] == "SUSPENDED"

    denied = await db_client.get(f"/api/v1/branches/{branch.id}", headers=staff_headers)
    assert denied.status_code == 403
    assert denied.json()["detail"]["code"] == "INACTIVE"

    removed = await db_client.delete(
        f"/api/v1/members/branch/{branch.id}/{staff_id}", headers=headers
    )
    assert removed.json() == {"deleted": True}

    listing = await db_client.get(f"/api/v1/members/branch/{branch.id}", headers=headers)
    assert listing.json() == []
