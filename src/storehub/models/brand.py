"""Brand and branch registry."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.storehub.models.base import utc_now


class Brand(SQLModel, table=True):
    """Top-level tenant, e.g. a restaurant chain."""

    __tablename__ = "brands"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    slug: str = Field(max_length=64, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)


class Branch(SQLModel, table=True):
    """A single store belonging to exactly one brand."""

    __tablename__ = "branches"
    __table_args__ = (UniqueConstraint("brand_id", "slug", name="uq_branches_brand_slug"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    brand_id: UUID = Field(foreign_key="brands.id", index=True)
    name: str = Field(max_length=100)
    slug: str = Field(max_length=64)
    created_at: datetime = Field(default_factory=utc_now)
