"""Decision probe payloads.

`action` stays a plain string so an unknown action comes back as a
FORBIDDEN decision instead of a validation error. Unusable ids are
treated as absent, the same way the route guards read them.
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.storehub.authz import normalize_id


class AuthorizeRequest(BaseModel):
    action: str = Field(examples=["branch:operate"])
    brand_id: UUID | None = None
    branch_id: UUID | None = None

    @field_validator("brand_id", "branch_id", mode="before")
    @classmethod
    def unusable_id_is_absent(cls, v: object) -> UUID | None:
        return normalize_id(v)


class DecisionRead(BaseModel):
    ok: bool
    scope: str | None = None
    effective_role: str | None = None
    reason: str | None = None
