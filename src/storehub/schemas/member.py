from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.storehub.models import BranchRole, BrandRole, MemberStatus


class BrandMemberCreate(BaseModel):
    user_id: UUID
    role: BrandRole = BrandRole.MEMBER


class BrandMemberUpdate(BaseModel):
    """At least one field must be set; the service rejects empty updates."""

    role: BrandRole | None = None
    status: MemberStatus | None = None


class BrandMemberRead(BaseModel):
    brand_id: UUID
    user_id: UUID
    role: BrandRole
    status: MemberStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class BranchMemberCreate(BaseModel):
    user_id: UUID
    role: BranchRole = BranchRole.STAFF


class BranchMemberUpdate(BaseModel):
    role: BranchRole | None = None
    status: MemberStatus | None = None


class BranchMemberRead(BaseModel):
    branch_id: UUID
    user_id: UUID
    role: BranchRole
    status: MemberStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class DeletedResponse(BaseModel):
    deleted: bool = True
