from uuid import UUID

from pydantic import BaseModel


class PrincipalRead(BaseModel):
    id: UUID
    email: str | None = None
    is_admin: bool = False


class MeResponse(BaseModel):
    user: PrincipalRead
