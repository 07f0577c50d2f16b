"""Brand/branch access guards for routes.

`require_action(action)` resolves the caller's access to the brand or
branch named in the request and either returns an `AccessContext` or
raises the HTTP error matching the denial.
"""

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status

from src.storehub.api.dependencies.auth import CurrentPrincipal
from src.storehub.api.dependencies.services import MembershipStoreDep
from src.storehub.authz import (
    Action,
    BranchResource,
    BrandResource,
    Decision,
    DenialReason,
    Denied,
    Granted,
    MembershipStore,
    Resource,
    Scope,
    authorize,
    can_modify_order,
    can_modify_product_or_inventory,
    normalize_id,
    parse_action,
    resource_for,
)
from src.storehub.core.logging import bind_scope_context, get_logger
from src.storehub.core.security import Principal
from src.storehub.models import BranchRole, BrandRole

logger = get_logger(__name__)

DENIAL_STATUS: dict[DenialReason, int] = {
    DenialReason.NOT_MEMBER: status.HTTP_401_UNAUTHORIZED,
    DenialReason.DB_ERROR: status.HTTP_401_UNAUTHORIZED,
    DenialReason.INACTIVE: status.HTTP_403_FORBIDDEN,
    DenialReason.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    DenialReason.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

DENIAL_MESSAGES: dict[DenialReason, str] = {
    DenialReason.NOT_MEMBER: "You are not a member of this brand or branch",
    DenialReason.DB_ERROR: "Membership could not be verified",
    DenialReason.INACTIVE: "Your membership is not active",
    DenialReason.FORBIDDEN: "Your role does not allow this action",
    DenialReason.NOT_FOUND: "Brand or branch not found",
}

_SCOPE_ID_FIELDS = ("brand_id", "branch_id")
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True)
class AccessContext:
    """Outcome of a passed access check, handed to the route."""

    principal: Principal
    action: Action
    resource: Resource | None
    decision: Granted

    @property
    def effective_role(self) -> BrandRole | BranchRole:
        return self.decision.effective_role

    @property
    def can_modify_product_or_inventory(self) -> bool:
        return can_modify_product_or_inventory(self.effective_role)

    @property
    def can_modify_order(self) -> bool:
        return can_modify_order(self.effective_role)


async def _json_body(request: Request) -> dict[str, Any]:
    if request.method not in _BODY_METHODS:
        return {}
    if "application/json" not in request.headers.get("content-type", ""):
        return {}
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


async def extract_scope_ids(request: Request) -> tuple[UUID | None, UUID | None]:
    """Find brand_id and branch_id in path params, then query, then JSON body."""
    found: dict[str, UUID | None] = dict.fromkeys(_SCOPE_ID_FIELDS)
    body: dict[str, Any] | None = None

    for field in _SCOPE_ID_FIELDS:
        value = normalize_id(request.path_params.get(field))
        if value is None:
            value = normalize_id(request.query_params.getlist(field))
        if value is None:
            if body is None:
                body = await _json_body(request)
            value = normalize_id(body.get(field))
        found[field] = value

    return found["brand_id"], found["branch_id"]


def _matches_scope(action: Action, resource: Resource | None) -> bool:
    if action.scope is Scope.BRAND:
        return isinstance(resource, BrandResource)
    return isinstance(resource, BranchResource)


def _admin_decision(action: Action) -> Granted:
    if action.scope is Scope.BRAND:
        return Granted(scope=Scope.BRAND, effective_role=BrandRole.OWNER)
    return Granted(scope=Scope.BRANCH, effective_role=BranchRole.BRANCH_OWNER)


async def evaluate(
    principal: Principal,
    action: Action | str,
    resource: Resource | None,
    store: MembershipStore,
) -> Decision:
    """Resolve access for a caller, letting platform admins through.

    Admins still need a resource of the right kind; the top role of the
    scope is reported as their effective role.
    """
    parsed = parse_action(action)
    if principal.is_admin and parsed is not None and _matches_scope(parsed, resource):
        return _admin_decision(parsed)
    return await authorize(store, principal.user_id, resource, action)


def denial_exception(action: Action, decision: Denied) -> HTTPException:
    return HTTPException(
        status_code=DENIAL_STATUS[decision.reason],
        detail={
            "code": decision.reason.value,
            "message": DENIAL_MESSAGES[decision.reason],
            "action": action.value,
        },
    )


def require_action(action: Action) -> Callable[..., Awaitable[AccessContext]]:
    """Build a dependency that allows the request only if `action` is permitted."""

    async def check_access(
        request: Request,
        principal: CurrentPrincipal,
        store: MembershipStoreDep,
    ) -> AccessContext:
        brand_id, branch_id = await extract_scope_ids(request)
        bind_scope_context(brand_id, branch_id)

        resource = resource_for(action, brand_id, branch_id)
        decision = await evaluate(principal, action, resource, store)

        if isinstance(decision, Denied):
            logger.info(
                "access_denied",
                action=action.value,
                reason=decision.reason.value,
                path=request.url.path,
            )
            raise denial_exception(action, decision)

        return AccessContext(
            principal=principal,
            action=action,
            resource=resource,
            decision=decision,
        )

    return check_access


BrandReadAccess = Annotated[AccessContext, Depends(require_action(Action.BRAND_READ))]
BrandUpdateAccess = Annotated[AccessContext, Depends(require_action(Action.BRAND_UPDATE))]
BranchCreateAccess = Annotated[AccessContext, Depends(require_action(Action.BRAND_BRANCH_CREATE))]
BrandMemberManageAccess = Annotated[
    AccessContext, Depends(require_action(Action.BRAND_MEMBER_MANAGE))
]
BranchReadAccess = Annotated[AccessContext, Depends(require_action(Action.BRANCH_READ))]
BranchUpdateAccess = Annotated[AccessContext, Depends(require_action(Action.BRANCH_UPDATE))]
BranchMemberManageAccess = Annotated[
    AccessContext, Depends(require_action(Action.BRANCH_MEMBER_MANAGE))
]
# Guard for order handling routes; the order endpoints themselves live outside this service.
BranchOperateAccess = Annotated[AccessContext, Depends(require_action(Action.BRANCH_OPERATE))]
