from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
MAX_SLUG_LENGTH = 63


class BrandCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(
        min_length=1,
        max_length=MAX_SLUG_LENGTH,
        pattern=SLUG_PATTERN,
        json_schema_extra={
            "examples": ["kimbap-house", "cafe-42"],
            "description": "Lowercase alphanumeric words separated by single hyphens.",
        },
    )


class BrandUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)


class BrandRead(BaseModel):
    id: UUID
    name: str
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}


class BranchCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=MAX_SLUG_LENGTH, pattern=SLUG_PATTERN)


class BranchUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)


class BranchRead(BaseModel):
    id: UUID
    brand_id: UUID
    name: str
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}
