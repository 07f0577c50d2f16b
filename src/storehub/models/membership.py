"""Brand and branch memberships.

Users live in the hosted auth provider, so user_id carries no foreign key.
The composite primary keys give at most one membership per (scope, user).
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel

from src.storehub.models.base import utc_now
from src.storehub.models.enums import BranchRole, BrandRole, MemberStatus


class BrandMember(SQLModel, table=True):
    __tablename__ = "brand_members"

    brand_id: UUID = Field(foreign_key="brands.id", primary_key=True)
    user_id: UUID = Field(primary_key=True, index=True)
    role: str = Field(default=BrandRole.MEMBER.value, max_length=32)
    status: str = Field(default=MemberStatus.ACTIVE.value, max_length=32)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> BrandRole:
        return BrandRole(self.role)

    @property
    def status_enum(self) -> MemberStatus:
        return MemberStatus(self.status)


class BranchMember(SQLModel, table=True):
    __tablename__ = "branch_members"

    branch_id: UUID = Field(foreign_key="branches.id", primary_key=True)
    user_id: UUID = Field(primary_key=True, index=True)
    role: str = Field(default=BranchRole.STAFF.value, max_length=32)
    status: str = Field(default=MemberStatus.ACTIVE.value, max_length=32)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> BranchRole:
        return BranchRole(self.role)

    @property
    def status_enum(self) -> MemberStatus:
        return MemberStatus(self.status)
