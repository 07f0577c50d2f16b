"""Authorization inputs and outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID

from src.storehub.authz.actions import Scope
from src.storehub.models.enums import BranchRole, BrandRole


@dataclass(frozen=True)
class BrandResource:
    brand_id: UUID


@dataclass(frozen=True)
class BranchResource:
    branch_id: UUID


Resource = BrandResource | BranchResource


class DenialReason(str, Enum):
    """Why access was refused."""

    NOT_MEMBER = "NOT_MEMBER"  # no membership at the requested scope
    INACTIVE = "INACTIVE"  # membership exists but is not ACTIVE
    FORBIDDEN = "FORBIDDEN"  # active membership, role not allowed
    NOT_FOUND = "NOT_FOUND"  # resource id missing or branch unknown
    DB_ERROR = "DB_ERROR"  # membership store could not be queried


@dataclass(frozen=True)
class Granted:
    scope: Scope
    effective_role: BrandRole | BranchRole
    inherited_from: BrandRole | None = None

    ok: ClassVar[bool] = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": True,
            "scope": self.scope.value,
            "effective_role": self.effective_role.value,
        }


@dataclass(frozen=True)
class Denied:
    reason: DenialReason

    ok: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "reason": self.reason.value}


Decision = Granted | Denied
